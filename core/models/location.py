# core/models/location.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Избранный город. Координаты хранятся текстом, как их вернул геокодер."""

    name: str
    lat: str
    lon: str

    @property
    def coordinates(self):
        return self.lat, self.lon
