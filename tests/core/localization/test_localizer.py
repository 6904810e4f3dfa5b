"""LocalizationCatalog / Localizer tests"""

from datetime import date

import pytest

from framtidsbygget.core.localization import LocalizationCatalog, Localizer, interpolate

BILINGUAL = {
    "languages": {
        "sv": {"code": "sv", "name": "Svenska", "default": True},
        "en": {"code": "en", "name": "English"},
    },
    "sv": {
        "common": {
            "cancel": "Avbryt",
            "duration_hours": "{hours}:{minutes}:{seconds}",
            "duration_minutes": "{minutes}:{seconds}",
        },
        "only_sv": "Bara svenska",
    },
    "en": {"common": {"cancel": "Cancel"}},
}


@pytest.fixture()
def localizer(localization) -> Localizer:
    return Localizer(localization)


@pytest.fixture()
def english() -> Localizer:
    localizer = Localizer(LocalizationCatalog(BILINGUAL))
    assert localizer.set_language("en")
    return localizer


class TestInterpolate:
    def test_replace(self):
        assert interpolate("Hej {name}!", {"name": "Anna"}) == "Hej Anna!"

    def test_unknown_placeholder_kept(self):
        assert interpolate("{a} och {b}", {"a": 1}) == "1 och {b}"

    def test_no_params(self):
        assert interpolate("{a}") == "{a}"


class TestCatalog:
    def test_default_language(self, localization):
        assert localization.default_language == "sv"

    def test_availability(self, localization):
        assert localization.is_available("sv")
        assert not localization.is_available("en")
        assert not localization.is_available("de")

    def test_lookup(self, localization):
        assert localization.lookup("sv", "common.cancel") == "Avbryt"
        assert localization.lookup("sv", "common.nope") is None
        assert localization.lookup("de", "common.cancel") is None


class TestTranslate:
    def test_simple(self, localizer):
        assert localizer.t("common.continue") == "Fortsätt"

    def test_params(self, localizer):
        assert localizer.t("dashboard.welcome_back", {"name": "Anna"}) == (
            "Välkommen tillbaka, Anna!"
        )
        assert localizer.t("dashboard.mission_progress", {"completed": 2, "total": 5}) == (
            "2 av 5 uppdrag slutförda"
        )

    def test_missing_key_returns_key(self, localizer):
        assert localizer.t("common.nonexistent") == "common.nonexistent"

    def test_non_string_returns_key(self, localizer):
        assert localizer.t("common") == "common"

    def test_fallback_to_default_language(self, english):
        assert english.t("common.cancel") == "Cancel"
        assert english.t("only_sv") == "Bara svenska"


class TestLanguage:
    def test_unavailable_language_rejected(self, localizer):
        assert localizer.set_language("en") is False
        assert localizer.language == "sv"

    def test_constructor_language_ignored_when_unavailable(self, localization):
        assert Localizer(localization, "en").language == "sv"

    def test_current_and_available(self, localizer):
        assert localizer.current_language()["name"] == "Svenska"
        assert [m["code"] for m in localizer.available_languages()] == ["sv"]


class TestFormatting:
    @pytest.mark.parametrize(
        "number,expected",
        [
            (1234567, "1 234 567"),
            (1234.5, "1 234,5"),
            (0.12345, "0,123"),
            (-42, "−42"),
            (0, "0"),
        ],
    )
    def test_number_sv(self, localizer, number, expected):
        assert localizer.format_number(number) == expected

    def test_number_en(self, english):
        assert english.format_number(1234567.25) == "1,234,567.25"
        assert english.format_number(-3) == "-3"

    def test_date(self, localizer, english):
        assert localizer.format_date(date(2024, 1, 5)) == "2024-01-05"
        assert localizer.format_date("2024-12-31T23:00:00Z") == "2024-12-31"
        assert english.format_date(date(2024, 1, 5)) == "1/5/2024"

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00"), (65, "1:05"), (3599, "59:59"), (3661, "1:01:01")],
    )
    def test_duration(self, localizer, seconds, expected):
        assert localizer.format_duration(seconds) == expected
