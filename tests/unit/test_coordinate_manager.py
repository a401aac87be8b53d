# -*- coding: utf-8 -*-
"""
Тесты для core/utils/coordinate_manager.py
"""
from decimal import Decimal

import pytest

from core.utils.coordinate_manager import format_coordinate, get_city_coordinates
from core.utils.error_handler import HttpStatusError, MissingFieldError, NoResultError, TransportError


def test_resolves_coordinates_as_decimal_text(fake_client, london_geo):
    client = fake_client([london_geo])

    assert get_city_coordinates("London", client) == ("51.5072", "-0.1276")
    assert client.calls == ["/geo/1.0/direct?q=London&limit=1"]
    print("✅ test_resolves_coordinates_as_decimal_text passed")


def test_city_name_is_sanitized_and_encoded(fake_client, london_geo):
    client = fake_client([london_geo])

    get_city_coordinates(" \tNew York ", client)

    assert client.calls == ["/geo/1.0/direct?q=New%20York&limit=1"]
    print("✅ test_city_name_is_sanitized_and_encoded passed")


def test_empty_result_raises_no_result(fake_client):
    with pytest.raises(NoResultError) as exc_info:
        get_city_coordinates("Atlantis", fake_client([[]]))

    assert str(exc_info.value) == "Error fetching geocoding data: API returned empty result."
    print("✅ test_empty_result_raises_no_result passed")


def test_non_list_document_raises_no_result(fake_client):
    with pytest.raises(NoResultError):
        get_city_coordinates("Atlantis", fake_client([{"cod": "400"}]))


def test_missing_lon_raises_missing_field(fake_client):
    client = fake_client([[{"name": "Nowhere", "lat": Decimal("10.5")}]])

    with pytest.raises(MissingFieldError) as exc_info:
        get_city_coordinates("Nowhere", client)

    assert str(exc_info.value).startswith("Error fetching geocoding data: ")
    assert "lat or lon" in str(exc_info.value)
    print("✅ test_missing_lon_raises_missing_field passed")


def test_non_numeric_coordinate_raises_missing_field(fake_client):
    client = fake_client([[{"lat": "north", "lon": Decimal("1.0")}]])

    with pytest.raises(MissingFieldError):
        get_city_coordinates("Nowhere", client)


def test_gateway_errors_are_wrapped_with_context(fake_client):
    with pytest.raises(HttpStatusError) as exc_info:
        get_city_coordinates("London", fake_client([HttpStatusError(401)]))

    assert exc_info.value.status_code == 401
    assert str(exc_info.value) == "Error fetching geocoding data: GET request status: 401"

    with pytest.raises(TransportError, match="^Error fetching geocoding data: "):
        get_city_coordinates("London", fake_client([TransportError("Failed to connect to OpenWeather API.")]))
    print("✅ test_gateway_errors_are_wrapped_with_context passed")


def test_format_coordinate():
    assert format_coordinate(Decimal("51.5072")) == "51.5072"
    assert format_coordinate(Decimal("-0.1276")) == "-0.1276"
    assert format_coordinate(Decimal("1E-7")) == "0.0000001"
    assert format_coordinate(-0.1276) == "-0.1276"
    assert format_coordinate(51) == "51"
    with pytest.raises(TypeError):
        format_coordinate(True)
    with pytest.raises(TypeError):
        format_coordinate("51.5")
    print("✅ test_format_coordinate passed")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
