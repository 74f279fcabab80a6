"""Follow-up question suggestions keyed on topic keywords."""

from __future__ import annotations

from dataclasses import dataclass

# Characters of a suggestion compared against the question to avoid echoing it
ECHO_PREFIX_CHARS = 15


@dataclass(frozen=True)
class SuggestionCategory:
    name: str
    keywords: tuple[str, ...]
    suggestions: tuple[str, ...]


# Checked in order; the first category with a keyword hit wins
CATEGORIES: tuple[SuggestionCategory, ...] = (
    SuggestionCategory(
        name="booking",
        keywords=("book", "reserv", "pick up", "pickup", "drop off", "dates"),
        suggestions=(
            "Can I change the dates of my booking?",
            "What do I need to bring when I pick up the van?",
            "How far in advance should I reserve?",
        ),
    ),
    SuggestionCategory(
        name="cancellation",
        keywords=("cancel", "refund"),
        suggestions=(
            "How long does a refund take?",
            "Is there a fee for cancelling late?",
            "Can I reschedule instead of cancelling?",
        ),
    ),
    SuggestionCategory(
        name="pricing",
        keywords=("price", "pricing", "cost", "pay", "deposit", "fee", "rate", "discount"),
        suggestions=(
            "Is a security deposit required?",
            "Are there discounts for longer rentals?",
            "Which payment methods do you accept?",
        ),
    ),
    SuggestionCategory(
        name="fleet",
        keywords=("van", "vehicle", "fleet", "seat", "camper", "cargo", "mileage"),
        suggestions=(
            "Which vans are available for my dates?",
            "Do your camper vans include bedding?",
            "Is there a mileage limit?",
        ),
    ),
    SuggestionCategory(
        name="account",
        keywords=("account", "login", "log in", "password", "sign up", "register", "profile"),
        suggestions=(
            "How do I reset my password?",
            "Where can I see my bookings?",
            "How do I update my profile details?",
        ),
    ),
)

DEFAULT_FOLLOW_UPS: tuple[str, ...] = (
    "How do I book a van?",
    "What is your cancellation policy?",
    "What types of vans do you offer?",
)


def suggest_follow_ups(question: str, answer: str = "") -> list[str]:
    """Pick follow-up suggestions for a question/answer pair.

    Args:
        question: The user's question.
        answer: The synthesized answer text.

    Returns:
        Suggestions from the first matching category, minus any that
        restate the question. ``DEFAULT_FOLLOW_UPS`` when nothing matches.
    """
    haystack = f"{question} {answer}".lower()
    asked = question.lower()

    for category in CATEGORIES:
        if any(keyword in haystack for keyword in category.keywords):
            return [
                s for s in category.suggestions
                if s[:ECHO_PREFIX_CHARS].lower() not in asked
            ]

    return list(DEFAULT_FOLLOW_UPS)
