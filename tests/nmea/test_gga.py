"""Tests for GGA sentence decoding."""

import pytest

from nmeasense.nmea import (
    DataGGA,
    EmptyFieldError,
    InvalidFieldsError,
    InvalidFormatError,
    SentenceKind,
    calculate_checksum,
    parse_sentence,
)
from nmeasense.nmea.gga import decode_gga

GGA_REFERENCE = (
    "$GPGGA,202530.00,5109.0262,N,11401.8407,W,5,40,0.5,1097.36,M,-17.00,M,18,TSTR*61"
)


class TestDecodeGGA:
    """Tests for decode_gga on the data section alone."""

    def test_reference_fields(self):
        result = decode_gga("202530.00,5109.0262,N,11401.8407,W,5,40,0.5,1097.36,M,-17.00,M,18,TSTR")
        assert result.utc_time == pytest.approx(202530.0)
        assert result.lat == pytest.approx(5109.0262)
        assert result.ns == "N"
        assert result.lon == pytest.approx(11401.8407)
        assert result.ew == "W"
        assert result.validity == 5
        assert result.sat == 40
        assert result.hdop == pytest.approx(0.5)
        assert result.alt == pytest.approx(1097.36)
        assert result.units == "M"

    def test_geoid_and_dgps_fields_not_populated(self):
        result = decode_gga("202530.00,5109.0262,N,11401.8407,W,5,40,0.5,1097.36,M,-17.00,M,18,TSTR")
        assert result.gsep is None
        assert result.gsep_units is None
        assert result.dgps_age is None
        assert result.dgps_id is None

    def test_no_fix(self):
        result = decode_gga("123519.00,,,,,0,00,,,,,,,")
        assert result.utc_time == pytest.approx(123519.0)
        assert result.lat is None and result.ns is None
        assert result.lon is None and result.ew is None
        assert result.validity == 0
        assert result.sat == 0
        assert result.hdop is None
        assert result.alt is None
        assert result.units is None

    def test_ten_fields_are_enough(self):
        result = decode_gga("1,2,N,3,E,1,4,0.9,5.5,M")
        assert result.units == "M"

    def test_missing_validity_raises_empty(self):
        with pytest.raises(EmptyFieldError) as info:
            decode_gga("123519.00,4807.038,N,01131.000,E,,08")
        assert info.value.name == "validity"

    def test_truncated_before_validity_raises_empty(self):
        with pytest.raises(EmptyFieldError):
            decode_gga("1,2")

    def test_non_numeric_validity_raises_invalid_format(self):
        with pytest.raises(InvalidFormatError) as info:
            decode_gga("123519.00,4807.038,N,01131.000,E,X,08")
        assert info.value.name == "validity"
        assert info.value.index == 5

    def test_out_of_range_satellites(self):
        with pytest.raises(InvalidFormatError):
            decode_gga("123519.00,4807.038,N,01131.000,E,1,256")

    def test_malformed_optional_latitude(self):
        with pytest.raises(InvalidFormatError):
            decode_gga("123519.00,abc,N,01131.000,E,1,08")

    @pytest.mark.parametrize(
        ("data", "name"),
        [
            ("123519.00,4807.038,E,01131.000,E,1,08", "ns"),
            ("123519.00,4807.038,North,01131.000,E,1,08", "ns"),
            ("123519.00,4807.038,n,01131.000,E,1,08", "ns"),
            ("123519.00,4807.038,N,01131.000,S,1,08", "ew"),
            ("123519.00,4807.038,N,01131.000,EW,1,08", "ew"),
        ],
    )
    def test_bad_hemisphere_raises_invalid_format(self, data, name):
        with pytest.raises(InvalidFormatError) as info:
            decode_gga(data)
        assert info.value.name == name

    def test_empty_hemispheres_are_none(self):
        result = decode_gga("123519.00,4807.038,,01131.000,,1,08")
        assert result.ns is None and result.ew is None
        assert result.latitude_degrees is None


class TestParseGGA:
    """Tests for complete GGA sentences."""

    def test_reference_sentence(self):
        result = parse_sentence(GGA_REFERENCE)
        assert isinstance(result, DataGGA)
        assert result.kind is SentenceKind.GGA
        assert result.validity == 5
        assert result.ew == "W"
        assert result.valid is True

    def test_single_frequency_fix(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
        result = parse_sentence(sentence)
        assert isinstance(result, DataGGA)
        assert result.latitude_degrees == pytest.approx(48.1173, rel=1e-4)
        assert result.longitude_degrees == pytest.approx(11.5166667, rel=1e-4)
        assert result.validity == 1
        assert result.sat == 8
        assert result.hdop == pytest.approx(0.9)
        assert result.alt == pytest.approx(545.4)

    def test_no_fix_has_no_position(self):
        result = parse_sentence("$GNGGA,123519.00,,,,,0,00,,,,,,,*5B")
        assert isinstance(result, DataGGA)
        assert result.latitude_degrees is None
        assert result.longitude_degrees is None
        assert result.valid is False

    def test_fix_with_empty_quality_fields(self):
        result = parse_sentence("$GNGGA,123519.00,4807.038,N,01131.000,E,1,,,545.4,M,,M,,*4D")
        assert isinstance(result, DataGGA)
        assert result.sat is None and result.hdop is None
        assert result.alt == pytest.approx(545.4)

    def test_gga_southern_western_hemisphere(self):
        sentence = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*65"
        result = parse_sentence(sentence)
        assert isinstance(result, DataGGA)
        assert result.latitude_degrees == pytest.approx(-33.93538333, rel=1e-4)
        assert result.longitude_degrees == pytest.approx(-151.20760, rel=1e-4)

    def test_gga_empty_validity_is_invalid(self):
        with pytest.raises(InvalidFieldsError) as info:
            parse_sentence("$GNGGA,123519.00,,,,,,,,,,,,,*6B")
        assert info.value.kind is SentenceKind.GGA
        assert isinstance(info.value.__cause__, EmptyFieldError)

    def test_gga_non_numeric_validity_is_invalid(self):
        sentence = (
            "$GPGGA,202530.00,5109.0262,N,11401.8407,W,X,40,0.5,1097.36,M,-17.00,M,18,TSTR*0C"
        )
        with pytest.raises(InvalidFieldsError) as info:
            parse_sentence(sentence)
        assert isinstance(info.value.__cause__, InvalidFormatError)

    def test_bad_hemisphere_is_invalid(self):
        content = "GPGGA,202530.00,5109.0262,X,11401.8407,W,5,40,0.5,1097.36,M,-17.00,M,18,TSTR"
        sentence = f"${content}*{calculate_checksum(content):02X}"
        with pytest.raises(InvalidFieldsError) as info:
            parse_sentence(sentence)
        assert isinstance(info.value.__cause__, InvalidFormatError)

    def test_rtk_fixed_solution(self):
        sentence = "$GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000*51"
        result = parse_sentence(sentence)
        assert isinstance(result, DataGGA)
        assert result.validity == 4
        assert result.sat == 12

    def test_surrounding_whitespace(self):
        sentence = "  $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F   \r\n"
        assert isinstance(parse_sentence(sentence), DataGGA)

    @pytest.mark.parametrize("talker", ["GP", "GN", "GL", "GA", "GB", "GQ"])
    def test_any_talker(self, talker):
        content = f"{talker}GGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,"
        sentence = f"${content}*{calculate_checksum(content):02X}"
        assert parse_sentence(sentence).validity == 1
