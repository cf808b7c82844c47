# studyhub/test/unit/test_password_strength.py

# Para rodar o script
# pytest studyhub/test/unit/test_password_strength.py -v

import pytest

from studyhub.domain.models.password_strength import PasswordStrength
from studyhub.domain.services.password_strength_service import PasswordStrengthService


def test_passw0rd_score_is_deterministic():
    first = PasswordStrengthService.calculate("Passw0rd!")
    second = PasswordStrengthService.calculate("Passw0rd!")

    # 8+ chars, four classes, no repeated or sequential run
    assert first.score == 7
    assert first.strength == "good"
    assert first == second


def test_maximum_score():
    result = PasswordStrengthService.calculate("Zq!9xWm#Rt$7kLp@")

    assert result.score == 9
    assert result.strength == "strong"
    assert result.feedback == []
    assert result.is_acceptable


def test_empty_password_scores_zero_plus_run_checks():
    result = PasswordStrengthService.calculate("")

    assert result.score == 2
    assert result.strength == "very-weak"
    assert "Use at least 8 characters" in result.feedback
    assert not result.is_acceptable


def test_feedback_lists_missing_classes():
    result = PasswordStrengthService.calculate("abcdefgh")

    assert "Add uppercase letters" in result.feedback
    assert "Add numbers" in result.feedback
    assert "Add special characters" in result.feedback
    assert "Avoid sequential characters" in result.feedback
    assert "Add lowercase letters" not in result.feedback


@pytest.mark.parametrize("score, band", [
    (0, "very-weak"), (2, "very-weak"),
    (3, "weak"), (4, "weak"),
    (5, "fair"), (6, "fair"),
    (7, "good"), (8, "good"),
    (9, "strong"),
])
def test_bands(score, band):
    assert PasswordStrengthService.band(score) == band


@pytest.mark.parametrize("strength, acceptable", [
    ("very-weak", False), ("weak", False), ("fair", True), ("good", True), ("strong", True),
])
def test_registration_gate(strength, acceptable):
    assert PasswordStrength(score=0, strength=strength).is_acceptable is acceptable
