"""
Tests unitaires pour l'extraction des champs depuis le HTML TV.com.

Les extracteurs sont testes directement sur des documents normalises,
sans transport. Un motif sans correspondance doit retourner un resultat
vide, jamais lever d'exception.
"""

import pytest

from tests.fixtures.tvcom_pages import (
    ALLEN_PAGE,
    EMPTY_PAGE,
    FINALE_PAGE,
    LISTING_ALL_SEASONS,
    LISTING_SEASON_1,
    PILOT_PAGE,
    SEARCH_EMPTY_PAGE,
    SEARCH_PAGE,
    SERIES_PAGE,
)
from tvcom.adapters.parsing.extractors import (
    EpisodeLink,
    Vitals,
    extract_cast,
    extract_episode_links,
    extract_field,
    extract_genres,
    extract_search_result,
    extract_vitals,
    normalize_document,
    parse_air_date,
)
from tvcom.core.value_objects.field_state import NOT_APPLICABLE


@pytest.fixture
def series_doc() -> str:
    return normalize_document(SERIES_PAGE)


@pytest.fixture
def pilot_doc() -> str:
    return normalize_document(PILOT_PAGE)


@pytest.fixture
def empty_doc() -> str:
    return normalize_document(EMPTY_PAGE)


class TestNormalizeDocument:
    """Tests pour normalize_document."""

    def test_strips_each_line(self):
        """Chaque ligne est debarrassee de ses espaces de debut et de fin."""
        assert normalize_document("  <a>  \n\t<b>\t\n") == "<a>\n<b>"

    def test_keeps_blank_lines(self):
        """Les lignes vides sont conservees (les motifs en dependent)."""
        assert normalize_document("<div>\n   \n<h1>") == "<div>\n\n<h1>"

    def test_handles_crlf(self):
        """Les fins de ligne Windows sont normalisees."""
        assert normalize_document("<a>\r\n<b>\r\n") == "<a>\n<b>"


class TestSeriesExtractors:
    """Tests pour les champs de la page resume d'une serie."""

    def test_name(self, series_doc):
        assert extract_field(series_doc, "series.name") == "Prison Break"

    def test_summary_skips_more_pictures_block(self, series_doc):
        """Le bloc "More Pictures" est ignore et les <br /> supprimes."""
        summary = extract_field(series_doc, "series.summary")
        assert summary == (
            "Structural engineer Michael Scofield turns himself into a\n"
            "criminal to help his brother."
        )

    def test_summary_without_more_pictures_block(self):
        doc = normalize_document(
            '<div class="mt-10">\nA simple summary.<br>\n</div>\n<p>footer</p>\n'
        )
        assert extract_field(doc, "series.summary") == "A simple summary."

    def test_genres_ordered_without_markup(self, series_doc):
        assert extract_genres(series_doc) == ["Drama", "Action", "Thriller"]

    def test_image(self, series_doc):
        assert extract_field(series_doc, "series.image") == (
            "http://image.com.com/tv/images/content_headers/program_new/31635.jpg"
        )

    def test_cast_in_document_order(self, series_doc):
        assert extract_cast(series_doc) == [
            "Wentworth Miller",
            "Dominic Purcell",
            "Sarah Wayne Callies",
        ]

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("series.name", None),
            ("series.summary", None),
            ("series.genres", []),
            ("series.image", None),
            ("series.cast", []),
        ],
    )
    def test_pattern_miss_returns_empty(self, empty_doc, tag, expected):
        """Un motif sans correspondance retourne None ou une liste vide."""
        assert extract_field(empty_doc, tag) == expected


class TestEpisodeLinks:
    """Tests pour extract_episode_links."""

    def test_links_in_document_order(self):
        assert extract_episode_links(LISTING_SEASON_1) == [
            EpisodeLink(475567, "Pilot"),
            EpisodeLink(475568, "Allen"),
        ]

    def test_all_seasons_listing(self):
        links = extract_episode_links(LISTING_ALL_SEASONS)
        assert [link.episode_id for link in links] == [475567, 475568, 476001]
        assert links[-1].name == "The Final Break"

    def test_no_links(self):
        assert extract_episode_links(EMPTY_PAGE) == []


class TestSearchResult:
    """Tests pour extract_search_result."""

    def test_first_show_result_wins(self):
        """Le lien vers une personne est ignore, la premiere serie est retenue."""
        assert extract_search_result(SEARCH_PAGE) == 31635

    def test_no_show_result(self):
        assert extract_search_result(SEARCH_EMPTY_PAGE) is None

    def test_html_escaped_ampersand(self):
        html = (
            '<a class="f-18" href="http://www.tv.com/24/show/3866/summary.html'
            '?q=24&amp;tag=search_results;title;1">24</a>'
        )
        assert extract_search_result(html) == 3866


class TestEpisodeExtractors:
    """Tests pour les champs de la page resume d'un episode."""

    def test_name(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.name") == "Pilot"

    def test_summary_without_line_breaks(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.summary") == (
            "Michael Scofield is desperate.\n"
            "He robs a bank to get into Fox River."
        )

    def test_vitals(self, pilot_doc):
        assert extract_vitals(pilot_doc) == Vitals(
            season_number=1,
            episode_number=1,
            first_aired="2005-08-29",
        )

    def test_vitals_not_applicable_date(self):
        vitals = extract_vitals(normalize_document(ALLEN_PAGE))
        assert vitals.first_aired == NOT_APPLICABLE
        assert vitals.episode_number == 2

    def test_vitals_without_weekday(self):
        vitals = extract_vitals(normalize_document(FINALE_PAGE))
        assert vitals == Vitals(season_number=4, episode_number=81, first_aired="2009-07-24")

    def test_vitals_miss_is_empty(self, empty_doc):
        assert extract_vitals(empty_doc) == Vitals(None, None, None)

    def test_stars_drop_role_notes(self, pilot_doc):
        """Star: ne doit pas correspondre a la ligne Guest Star: qui la precede."""
        assert extract_field(pilot_doc, "episode.stars") == [
            "Wentworth Miller",
            "Dominic Purcell",
        ]

    def test_guest_stars(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.guest_stars") == [
            "Stacy Keach",
            "Muse Watson",
        ]

    def test_recurring_roles(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.recurring_roles") == ["Robert Knepper"]

    def test_writers(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.writers") == ["Paul Scheuring"]

    def test_directors(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.directors") == [
            "Brett Ratner",
            "Kevin Hooks",
        ]

    def test_name_with_comma_kept_whole(self):
        """Une virgule dans le texte d'une ancre ne coupe pas le nom."""
        doc = normalize_document(
            "<tr>\n<td>\nStar:\n</td>\n<td>\n"
            '<a href="/p/1">Sammy Davis, Jr.</a> (Himself),&nbsp;'
            '<a href="/p/2">Wentworth Miller</a> (Michael)\n'
            "</td>\n</tr>\n"
        )
        assert extract_field(doc, "episode.stars") == [
            "Sammy Davis, Jr.",
            "Wentworth Miller",
        ]

    def test_series_id(self, pilot_doc):
        assert extract_field(pilot_doc, "episode.series_id") == 31635

    def test_people_without_rows(self):
        doc = normalize_document(ALLEN_PAGE)
        for tag in ("stars", "guest_stars", "recurring_roles", "writers", "directors"):
            assert extract_field(doc, f"episode.{tag}") == []

    def test_unknown_field(self, pilot_doc):
        with pytest.raises(KeyError):
            extract_field(pilot_doc, "episode.rating")


class TestParseAirDate:
    """Tests pour parse_air_date."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Monday August 29, 2005", "2005-08-29"),
            ("August 29, 2005", "2005-08-29"),
            ("Tuesday, May 1, 2007", "2007-05-01"),
            ("n/a", NOT_APPLICABLE),
            ("Smarch 3, 2005", None),
            ("soon", None),
            (None, None),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_air_date(raw) == expected
