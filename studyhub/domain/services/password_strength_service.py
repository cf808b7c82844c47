# studyhub/domain/services/password_strength_service.py

import re

from studyhub.domain.models.password_strength import (
    FAIR,
    GOOD,
    STRONG,
    VERY_WEAK,
    WEAK,
    PasswordStrength,
)

REPEATED_PATTERN = re.compile(r"(.)\1{2,}")
SEQUENTIAL_PATTERN = re.compile(
    r"(?:abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq|pqr|qrs|rst|stu|tuv|uvw|vwx|wxy|xyz"
    r"|012|123|234|345|456|567|678|789)",
    re.IGNORECASE,
)
LOWER_PATTERN = re.compile(r"[a-z]")
UPPER_PATTERN = re.compile(r"[A-Z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_PATTERN = re.compile(r"[^a-zA-Z0-9]")


class PasswordStrengthService:
    """
    Scores a password for user feedback.

    This is separate from the accept/reject policy in InputValidator; at
    registration it acts as a second, stricter gate.
    """

    @staticmethod
    def has_repeated_run(password: str) -> bool:
        return REPEATED_PATTERN.search(password) is not None

    @staticmethod
    def has_sequential_run(password: str) -> bool:
        return SEQUENTIAL_PATTERN.search(password) is not None

    @classmethod
    def calculate(cls, password: str) -> PasswordStrength:
        """
        Score a password from 0 to 9.

        One point each for length >= 8, >= 12 and >= 16, for each character
        class present (lower, upper, digit, special) and for the absence of
        repeated and of sequential runs.
        """
        score = 0
        feedback = []

        length = len(password)
        if length >= 8:
            score += 1
        if length >= 12:
            score += 1
        if length >= 16:
            score += 1
        elif length < 8:
            feedback.append("Use at least 8 characters")

        if LOWER_PATTERN.search(password):
            score += 1
        else:
            feedback.append("Add lowercase letters")

        if UPPER_PATTERN.search(password):
            score += 1
        else:
            feedback.append("Add uppercase letters")

        if DIGIT_PATTERN.search(password):
            score += 1
        else:
            feedback.append("Add numbers")

        if SPECIAL_PATTERN.search(password):
            score += 1
        else:
            feedback.append("Add special characters")

        if not cls.has_repeated_run(password):
            score += 1
        else:
            feedback.append("Avoid repeated characters")

        if not cls.has_sequential_run(password):
            score += 1
        else:
            feedback.append("Avoid sequential characters")

        return PasswordStrength(score=score, strength=cls.band(score), feedback=feedback)

    @staticmethod
    def band(score: int) -> str:
        if score <= 2:
            return VERY_WEAK
        if score <= 4:
            return WEAK
        if score <= 6:
            return FAIR
        if score <= 8:
            return GOOD
        return STRONG
