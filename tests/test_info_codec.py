# tests/test_info_codec.py
import pytest

from locations.info_codec import InfoParts, decode_info, encode_info, replace_info_field


def test_address_only_has_no_sentinels():
    assert encode_info({"address": "123 Main St", "description": "", "url": ""}) == "123 Main St"


def test_all_three_fields():
    packed = encode_info({"address": "A", "description": "B", "url": "C"})
    assert packed == "A|||DESCRIPTION|||B|||URL|||C"
    assert decode_info(packed) == InfoParts("A", "B", "C")


def test_url_without_description_keeps_empty_description_sentinel():
    packed = encode_info(InfoParts("A", "  ", "http://x"))
    assert packed == "A|||DESCRIPTION||||||URL|||http://x"
    assert decode_info(packed) == InfoParts("A", "", "http://x")


def test_decode_url_sentinel_without_description():
    assert decode_info("A|||URL|||C") == InfoParts("A", "", "C")


def test_decode_description_without_url():
    assert decode_info("A|||DESCRIPTION|||long text") == InfoParts("A", "long text", "")


def test_decode_plain_and_empty():
    assert decode_info("just an address") == InfoParts("just an address", "", "")
    assert decode_info("") == InfoParts("", "", "")
    assert decode_info(None) == InfoParts("", "", "")


def test_encode_trims_each_field():
    packed = encode_info({"address": "  A ", "description": " B ", "url": " C "})
    assert packed == "A|||DESCRIPTION|||B|||URL|||C"


def test_encode_accepts_missing_keys():
    assert encode_info({"address": "A"}) == "A"


def test_out_of_order_sentinels_do_not_raise():
    # la URL antes de la descripción queda pegada a la dirección
    assert decode_info("A|||URL|||C|||DESCRIPTION|||B") == InfoParts("A|||URL|||C", "B", "")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "A",
        "A|||DESCRIPTION|||B",
        "A|||URL|||C",
        "A|||DESCRIPTION|||B|||URL|||C",
        "A|||DESCRIPTION||||||URL|||C",
        "|||DESCRIPTION|||B",
        "A|||URL|||C|||URL|||D",
        "A|||URL|||C|||DESCRIPTION|||B",
        "A|||DESCRIPTION|||B|||DESCRIPTION|||C",
        "A |||DESCRIPTION||| B",
        " A |||URL||| C ",
        "  A  ",
        "A |||DESCRIPTION|||  |||URL||| C",
        "A|||URL|||C|||DESCRIPTION|||",
    ],
)
def test_round_trip_is_stable(raw):
    parts = decode_info(raw)
    assert decode_info(encode_info(parts)) == parts


def test_replace_single_field():
    raw = "A|||DESCRIPTION|||B|||URL|||C"
    assert replace_info_field(raw, "description", "new") == "A|||DESCRIPTION|||new|||URL|||C"
    assert replace_info_field(raw, "description", "") == "A|||DESCRIPTION||||||URL|||C"
    assert replace_info_field("A", "url", "http://x") == "A|||DESCRIPTION||||||URL|||http://x"


def test_replace_unknown_field():
    with pytest.raises(ValueError):
        replace_info_field("A", "phone", "123")


def test_decode_trims_each_field():
    assert decode_info(" A |||DESCRIPTION||| B |||URL||| C ") == InfoParts("A", "B", "C")
    assert decode_info("A |||URL||| C") == InfoParts("A", "", "C")


def test_address_holding_url_sentinel_is_not_split_again():
    parts = decode_info("A|||URL|||C|||DESCRIPTION|||")
    assert parts == InfoParts("A|||URL|||C", "", "")
    assert encode_info(parts) == "A|||URL|||C|||DESCRIPTION|||"
