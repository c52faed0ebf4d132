"""
tests/units/test_units.py

Covers:
  - Weekday and Month ordinals and their inverses
  - Invalid ordinals
  - Month quarter and non-leap last day
  - Parsing full and short names (trimmed, case-insensitive)
  - Display names from the default and from custom name tables
  - NameTable validation and immutability
"""

import dataclasses

import pytest

from serialdate import InvalidOrdinalError, UnrecognizedNameError
from serialdate.units import ENGLISH, Month, NameTable, Weekday, month_names


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def french():
    return NameTable(
        months=(
            "janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre",
        ),
        short_months=(
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ),
        weekdays=("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"),
        short_weekdays=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
    )


# ── Weekday ───────────────────────────────────────────────────────────────────

class TestWeekday:

    def test_ordinals_run_sunday_to_saturday(self):
        assert [w.ordinal for w in Weekday] == [1, 2, 3, 4, 5, 6, 7]
        assert Weekday.SUNDAY.ordinal == 1
        assert Weekday.SATURDAY.ordinal == 7

    def test_from_ordinal_inverts_ordinal(self):
        for w in Weekday:
            assert Weekday.from_ordinal(w.ordinal) is w

    def test_from_ordinal_accepts_member(self):
        assert Weekday.from_ordinal(Weekday.MONDAY) is Weekday.MONDAY

    @pytest.mark.parametrize("n", [0, 8, -1])
    def test_invalid_ordinal_raises(self, n):
        with pytest.raises(InvalidOrdinalError):
            Weekday.from_ordinal(n)

    @pytest.mark.parametrize("n", [2.0, 2.5, "2"])
    def test_non_integer_ordinal_raises(self, n):
        with pytest.raises(InvalidOrdinalError):
            Weekday.from_ordinal(n)

    def test_invalid_ordinal_is_value_error(self):
        with pytest.raises(ValueError):
            Weekday.from_ordinal(9)

    @pytest.mark.parametrize("s", ["Wednesday", " Wednesday ", "Wed", "wednesday", "WED"])
    def test_parse(self, s):
        assert Weekday.parse(s) is Weekday.WEDNESDAY

    def test_parse_unknown_raises(self):
        with pytest.raises(UnrecognizedNameError):
            Weekday.parse("Wodensday")

    def test_display_name(self):
        assert Weekday.SATURDAY.display_name() == "Saturday"
        assert Weekday.SATURDAY.display_name(short=True) == "Sat"

    def test_custom_table(self, french):
        assert Weekday.parse("Vendredi", names=french) is Weekday.FRIDAY
        assert Weekday.SUNDAY.display_name(names=french) == "dimanche"
        with pytest.raises(UnrecognizedNameError):
            Weekday.parse("Friday", names=french)


# ── Month ─────────────────────────────────────────────────────────────────────

class TestMonth:

    def test_ordinals(self):
        assert [m.ordinal for m in Month] == list(range(1, 13))

    def test_from_ordinal_inverts_ordinal(self):
        for m in Month:
            assert Month.from_ordinal(m.ordinal) is m

    @pytest.mark.parametrize("n", [0, 13])
    def test_invalid_ordinal_raises(self, n):
        with pytest.raises(InvalidOrdinalError):
            Month.from_ordinal(n)

    def test_float_ordinal_raises(self):
        with pytest.raises(InvalidOrdinalError):
            Month.from_ordinal(2.0)

    def test_quarters(self):
        assert [m.quarter for m in Month] == [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4]

    def test_last_days(self):
        assert [m.last_day for m in Month] == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    @pytest.mark.parametrize("s", ["January", " January ", "Jan", "JANUARY"])
    def test_parse(self, s):
        assert Month.parse(s) is Month.JANUARY

    def test_parse_unknown_raises(self):
        with pytest.raises(UnrecognizedNameError):
            Month.parse("Janvier")

    def test_display_name(self):
        assert Month.DECEMBER.display_name() == "December"
        assert Month.DECEMBER.display_name(short=True) == "Dec"

    def test_month_names(self):
        assert month_names()[0] == "January"
        assert month_names(short=True)[-1] == "Dec"
        assert len(month_names()) == 12

    def test_custom_table(self, french):
        assert Month.parse(" Août ", names=french) is Month.AUGUST
        assert month_names(names=french)[1] == "février"


# ── NameTable ─────────────────────────────────────────────────────────────────

class TestNameTable:

    def test_wrong_number_of_names_raises(self):
        with pytest.raises(ValueError):
            dataclasses.replace(ENGLISH, months=ENGLISH.months[:11])

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ENGLISH.months = ()

    def test_lists_become_tuples(self):
        table = NameTable(
            months=list(ENGLISH.months),
            short_months=list(ENGLISH.short_months),
            weekdays=list(ENGLISH.weekdays),
            short_weekdays=list(ENGLISH.short_weekdays),
        )
        assert isinstance(table.months, tuple)
        assert table == ENGLISH

    def test_name_lookup_rejects_bad_ordinal(self):
        with pytest.raises(InvalidOrdinalError):
            ENGLISH.month_name(13)
        with pytest.raises(InvalidOrdinalError):
            ENGLISH.weekday_name(0)

    def test_parse_returns_ordinals(self):
        assert ENGLISH.parse_month("nov") == 11
        assert ENGLISH.parse_weekday("Sun") == 1

    def test_from_locale_is_complete(self):
        table = NameTable.from_locale()
        assert len(table.months) == 12
        assert len(table.weekdays) == 7
        # Sunday first, whatever the locale
        assert Weekday.parse(table.weekdays[0], names=table) is Weekday.SUNDAY
