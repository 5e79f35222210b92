"""Tests for the individual feature detectors."""

import pytest

from sa_ats.scoring import detectors
from sa_ats.scoring.detectors import detect
from sa_ats.utils.text_normalizer import normalize_cv_text


def _flags(text: str):
    return detect(normalize_cv_text(text))


class TestStructuralDetectors:
    @pytest.mark.parametrize(
        "text",
        ["education", "work experience", "technical skills", "personal details", "references available"],
    )
    def test_sections_found(self, text: str) -> None:
        assert detectors.has_sections(text)

    def test_sections_missing(self) -> None:
        assert not detectors.has_sections("john smith\nworked at a shop")

    @pytest.mark.parametrize("text", ["• led the team", "- managed stock", "  * planned events"])
    def test_bullet_points_found(self, text: str) -> None:
        assert detectors.has_bullet_points(text)

    def test_hyphen_inside_words_is_not_a_bullet(self) -> None:
        assert not detectors.has_bullet_points("full-time role at a well-known firm")

    @pytest.mark.parametrize(
        "text",
        ["email: me@x.com", "tel 011 555 0000", "linkedin.com/in/me", "reach me at thandi@example.co.za"],
    )
    def test_contact_info_found(self, text: str) -> None:
        assert detectors.has_contact_info(text)

    def test_contact_word_inside_other_word_is_ignored(self) -> None:
        assert not detectors.has_contact_info("hotel management and hospitality")

    @pytest.mark.parametrize(
        "text",
        [
            "telephone: 011 555 0000",
            "cellphone: 082 555 0199",
            "cell phone 082 555 0199",
            "contact number: 021 555 0100",
        ],
    )
    def test_local_contact_labels_found(self, text: str) -> None:
        assert detectors.has_contact_info(text)

    @pytest.mark.parametrize(
        "text",
        ["kept skills up to date", "marketing - present", "summary - current role", "mark to date"],
    )
    def test_prose_is_not_a_date_range(self, text: str) -> None:
        assert not detectors.has_date_ranges(text)

    @pytest.mark.parametrize("text", ["september 2019 - current", "2018 to date", "feb. 2021 to now"])
    def test_full_month_names_and_open_ends(self, text: str) -> None:
        assert detectors.has_date_ranges(text)

    @pytest.mark.parametrize(
        "text",
        ["jan 2020 - present", "march 2018 to june 2019", "2019-2021", "2015 to present", "worked there up to 2021"],
    )
    def test_date_ranges_found(self, text: str) -> None:
        assert detectors.has_date_ranges(text)

    def test_single_year_is_not_a_range(self) -> None:
        assert not detectors.has_date_ranges("graduated in 2016")

    def test_dates_limited_to_1900_2099(self) -> None:
        assert detectors.has_dates("graduated 1999")
        assert detectors.has_dates("since 2021")
        assert not detectors.has_dates("reference number 1850 and 2150")


class TestContentDetectors:
    def test_action_verbs(self) -> None:
        assert detectors.has_action_verbs("managed a team of five")
        assert not detectors.has_action_verbs("responsible for the team")

    @pytest.mark.parametrize(
        "text",
        ["grew revenue 25%", "cut costs by 10 percent", "increased sales by 25", "reduced churn by r500 000"],
    )
    def test_quantified_results_found(self, text: str) -> None:
        assert detectors.has_quantified_results(text)

    def test_quantified_results_missing(self) -> None:
        assert not detectors.has_quantified_results("increased customer satisfaction")

    def test_skills_are_whole_word_matches(self) -> None:
        found = detectors.find_skills("javascript, c++ and node.js; ci/cd pipelines")

        assert "javascript" in found
        assert "c++" in found
        assert "node.js" in found
        assert "ci/cd" in found
        assert "java" not in found

    def test_average_line_length(self) -> None:
        assert detectors.average_line_length(("abcd", "ab")) == 3
        assert detectors.average_line_length(()) == 0.0


class TestRegionalDetectors:
    def test_sa_keywords_are_whole_words(self) -> None:
        flags = _flags("Sales manager in Johannesburg with a matric certificate")

        assert "johannesburg" in flags.found_sa_keywords
        assert "matric" in flags.found_sa_keywords
        # "sa" must not match inside "sales"
        assert "sa" not in flags.found_sa_keywords

    def test_bbbee_terms(self) -> None:
        flags = _flags("B-BBEE Level 2 contributor, employment equity candidate")

        assert flags.bbbee_terms == ("b-bbee", "employment equity")

    def test_nqf_mentions_are_counted(self) -> None:
        flags = _flags("Diploma (NQF Level 6)\nDegree, NQF 7\nRegistered with the National Qualifications Framework")

        assert flags.nqf_mentions == 3

    def test_locations_languages_and_certifications(self) -> None:
        flags = _flags("Based in Durban, KwaZulu-Natal. Speaks isiZulu and Afrikaans. CA(SA), SAICA member")

        assert {"durban", "kwazulu-natal"} <= set(flags.sa_locations)
        assert {"isizulu", "afrikaans"} <= set(flags.sa_languages)
        assert {"ca(sa)", "saica"} <= set(flags.found_certifications)


def test_empty_text_fails_every_detector() -> None:
    flags = _flags("")

    assert not any(
        [
            flags.has_sections,
            flags.has_bullet_points,
            flags.has_contact_info,
            flags.has_date_ranges,
            flags.has_dates,
            flags.has_action_verbs,
            flags.has_quantified_results,
            flags.has_key_skills,
            flags.has_long_lines,
        ]
    )
    assert flags.avg_line_length == 0.0
    assert flags.char_count == 0
    assert flags.found_sa_keywords == ()
    assert flags.nqf_mentions == 0


def test_long_lines_flagged() -> None:
    flags = _flags("x" * 201)

    assert flags.has_long_lines
    assert flags.avg_line_length == 201
