from __future__ import annotations

from models.outcome import Outcome
from services.email_matching import best_email, local_part, name_probes


def test_name_match_wins_over_unrelated_address():
    result = best_email("Jane Smith", {"jane.smith@council.gov.au", "random@other.com"})
    assert result == ("email", "jane.smith@council.gov.au")
    assert result[0] is Outcome.EMAIL


def test_unrelated_address_only_is_low_confidence():
    assert best_email("Jane Smith", {"random@other.com"}) == ("no-matching-email", "random@other.com")


def test_no_candidates():
    assert best_email("Jane Smith", set()) == ("no-email-found", "")
    assert best_email("Jane Smith", []) == (Outcome.NO_EMAIL_FOUND, "")


def test_closest_of_several_name_matches():
    emails = ["jsmith@ryde.nsw.gov.au", "jane.smith@ryde.nsw.gov.au", "smith.family@gmail.com"]
    assert best_email("Jane Smith", emails) == (Outcome.EMAIL, "jane.smith@ryde.nsw.gov.au")


def test_surname_alone_is_enough_to_match():
    emails = ["info@ryde.nsw.gov.au", "cr.smith@ryde.nsw.gov.au"]
    assert best_email("Jane Smith", emails) == (Outcome.EMAIL, "cr.smith@ryde.nsw.gov.au")


def test_name_is_matched_case_insensitively():
    assert best_email("  JANE SMITH ", ["Jane.Smith@Ryde.nsw.gov.au"]) == (Outcome.EMAIL, "Jane.Smith@Ryde.nsw.gov.au")


def test_ties_keep_first_encountered():
    emails = ["jane.a@x.com", "jane.b@x.com"]
    assert best_email("jane", emails)[1] == "jane.a@x.com"
    assert best_email("jane", list(reversed(emails)))[1] == "jane.b@x.com"


def test_low_confidence_picks_globally_closest():
    emails = ["information@ryde.nsw.gov.au", "amg@ryde.nsw.gov.au"]
    outcome, email = best_email("Amy Ng", emails)
    assert outcome is Outcome.NO_MATCHING_EMAIL
    assert email == "amg@ryde.nsw.gov.au"


def test_name_without_letters_still_returns_a_candidate():
    assert best_email("1234", ["x@y.com"]) == (Outcome.NO_MATCHING_EMAIL, "x@y.com")


def test_probes_and_local_part():
    assert name_probes("Cr Jane van der Berg") == ["cr", "berg"]
    assert name_probes("") == []
    assert local_part("Jane.Smith@x.com") == "jane.smith"
    assert local_part("@x.com") == ""
