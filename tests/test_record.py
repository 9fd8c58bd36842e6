"""Test the conversion between `Gecos` and its string representation"""

import pytest

from gecos import Gecos, InvalidCharacter, SanitizedString


def S(value: str) -> SanitizedString:
    return SanitizedString(value)


class TestToGecosString:
    def test_empty(self):
        gecos = Gecos(full_name=None, room=None, work_phone=None, home_phone=None, other=[])

        assert gecos.to_gecos_string() == ",,,,"
        assert Gecos().to_gecos_string() == ",,,,"

    def test_full_name(self):
        assert Gecos(full_name=S("Test Name")).to_gecos_string() == "Test Name,,,,"

    def test_other(self):
        gecos = Gecos(full_name=S("Test Name"), other=[S("Some info"), S("More info")])

        assert gecos.to_gecos_string() == "Test Name,,,,Some info,More info"

    def test_all_fields(self):
        gecos = Gecos(
            full_name=S("Guest"),
            room=S("H-1.13"),
            work_phone=S("574"),
            home_phone=S("+491606799999"),
            other=[S("guest@example.com")],
        )

        assert gecos.to_gecos_string() == "Guest,H-1.13,574,+491606799999,guest@example.com"
        assert str(gecos) == gecos.to_gecos_string()

    def test_empty_other_elements(self):
        gecos = Gecos(other=[S(""), S("")])

        assert gecos.to_gecos_string() == ",,,,,"


class TestFromGecosString:
    def test_full_name_only(self):
        gecos = Gecos.from_gecos_string("Some Person,,,,")

        assert gecos.full_name == S("Some Person")
        assert gecos.room is None
        assert gecos.work_phone is None
        assert gecos.home_phone is None
        assert gecos.other == []

    def test_all_fields(self):
        gecos = Gecos.from_gecos_string(
            "Some Person,Room,Work phone,Home phone,Other 1,Other 2"
        )

        assert str(gecos.full_name) == "Some Person"
        assert str(gecos.room) == "Room"
        assert str(gecos.work_phone) == "Work phone"
        assert str(gecos.home_phone) == "Home phone"
        assert [str(o) for o in gecos.other] == ["Other 1", "Other 2"]

    def test_partially_populated(self):
        gecos = Gecos.from_gecos_string("Some Person,,,Home phone,Other")

        assert str(gecos.full_name) == "Some Person"
        assert gecos.room is None
        assert gecos.work_phone is None
        assert str(gecos.home_phone) == "Home phone"
        assert gecos.other == [S("Other")]

    def test_incomplete(self):
        gecos = Gecos.from_gecos_string("Some Person")

        assert str(gecos.full_name) == "Some Person"
        assert gecos.room is None
        assert gecos.work_phone is None
        assert gecos.home_phone is None
        assert gecos.other == []

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", Gecos()),
            (",,,,", Gecos()),
            ("a,b", Gecos(full_name=S("a"), room=S("b"))),
            (",b,,d", Gecos(room=S("b"), home_phone=S("d"))),
            ("a,b,c,d", Gecos(S("a"), S("b"), S("c"), S("d"))),
            ("a,b,c,d,e,f,g", Gecos(S("a"), S("b"), S("c"), S("d"), [S("e"), S("f"), S("g")])),
        ],
    )
    def test_missing_and_empty_fields(self, text: str, expected: Gecos):
        assert Gecos.from_gecos_string(text) == expected

    def test_single_empty_other_is_unset(self):
        gecos = Gecos.from_gecos_string("a,b,c,d,")

        assert gecos.other == []
        assert gecos.to_gecos_string() == "a,b,c,d,"

    def test_empty_other_elements_are_kept(self):
        gecos = Gecos.from_gecos_string("a,b,c,d,,")

        assert gecos.other == [S(""), S("")]
        assert gecos.to_gecos_string() == "a,b,c,d,,"

    def test_trailing_commas_in_other(self):
        gecos = Gecos.from_gecos_string("a,,,,x,,")

        assert gecos.other == [S("x"), S(""), S("")]

    @pytest.mark.parametrize(
        "text, char",
        [
            ("a,:,c,d,e", ":"),
            ("a=b,c", "="),
            ("a,b,c,d,e,f\\g", "\\"),
            ('a,b,c,"d",e', '"'),
            ("a,b,c,d,e\nf", "\n"),
            ("passwd:x:1000", ":"),
        ],
    )
    def test_invalid_char(self, text: str, char: str):
        with pytest.raises(InvalidCharacter) as exc_info:
            Gecos.from_gecos_string(text)

        assert exc_info.value.char == char

    def test_not_a_string(self):
        with pytest.raises(TypeError):
            Gecos.from_gecos_string(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "gecos",
    [
        Gecos(),
        Gecos(full_name=S("Test Name")),
        Gecos(full_name=S("Test Name"), room=S("H-1.13"), other=[]),
        Gecos(work_phone=S("574"), other=[]),
        Gecos(other=[S(""), S("")]),
        Gecos(other=[S("a"), S("")]),
        Gecos(home_phone=S("574"), other=[S("a"), S(""), S("b")]),
        Gecos(S(" Guest "), S("H-1.13"), S("574"), S("+491606799999"), [S("x@y.z")]),
    ],
)
def test_round_trip(gecos: Gecos):
    assert Gecos.from_gecos_string(gecos.to_gecos_string()) == gecos


def test_round_trip_single_empty_other_becomes_empty():
    gecos = Gecos(full_name=S("Guest"), other=[S("")])

    parsed = Gecos.from_gecos_string(gecos.to_gecos_string())

    assert parsed.other == []
    assert parsed == Gecos(full_name=S("Guest"))


def test_round_trip_empty_fixed_field_becomes_unset():
    gecos = Gecos(full_name=S("Guest"), room=S(""))

    parsed = Gecos.from_gecos_string(gecos.to_gecos_string())

    assert parsed.room is None
    assert parsed != gecos
    assert parsed == Gecos(full_name=S("Guest"))


class TestNew:
    def test_plain_strings(self):
        gecos = Gecos.new("Guest", room="H-1.13", other=["one", S("two")])

        assert gecos == Gecos(full_name=S("Guest"), room=S("H-1.13"), other=[S("one"), S("two")])

    def test_invalid(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            Gecos.new("Guest", other=["ok", "not:ok"])

        assert exc_info.value.char == ":"

    @pytest.mark.parametrize("other", ["mail", S("mail")])
    def test_other_must_not_be_a_string(self, other):
        with pytest.raises(TypeError):
            Gecos.new("Guest", other=other)


class TestDict:
    def test_dict(self):
        gecos = Gecos.from_gecos_string("Guest,,574,,a,b")

        assert gecos.dict() == {
            "full_name": "Guest",
            "room": None,
            "work_phone": "574",
            "home_phone": None,
            "other": ["a", "b"],
        }
        assert Gecos.from_dict(gecos.dict()) == gecos

    def test_missing_keys(self):
        assert Gecos.from_dict({"full_name": "Guest"}) == Gecos(full_name=S("Guest"))

    def test_invalid(self):
        with pytest.raises(InvalidCharacter):
            Gecos.from_dict({"room": "a,b"})

    @pytest.mark.parametrize("other", ["mail", ""])
    def test_other_must_not_be_a_string(self, other: str):
        with pytest.raises(TypeError):
            Gecos.from_dict({"full_name": "Guest", "other": other})

    def test_other_none(self):
        assert Gecos.from_dict({"full_name": "Guest", "other": None}) == Gecos(full_name=S("Guest"))
