"""Shared fixtures for tests — synthetic FAQ corpora, no network calls."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from vanfaq.config import Settings
from vanfaq.documents.schemas import SourceDocument

# ---------------------------------------------------------------------------
# Synthetic document content
# ---------------------------------------------------------------------------


@pytest.fixture
def booking_faq_text() -> str:
    return textwrap.dedent("""\
        ## Booking

        - **How do I book a van?** Select dates and click Book.
        - **What do I need at pick-up?** Bring your driving licence and the card used to pay.
    """)


@pytest.fixture
def faq_markdown() -> str:
    return textwrap.dedent("""\
        # Van Rental FAQ

        ## Booking

        - **How do I book a van?** Select dates and click Book.
        - **Can I change my reservation dates?** Open My Bookings and pick new dates.

        ## Cancellations

        - **What is the cancellation policy?** Cancel seven days before pick-up for a full refund.
        - **How long do refunds take?** Refunds reach your card within ten business days.

        ## Pricing

        - **How is the price calculated?** The daily rate times the number of rental days.
        - **Is there a security deposit?** A refundable deposit is held on your card.

        ## Account

        - **How do I reset my password?** Use the forgot password link on the login page.
    """)


@pytest.fixture
def fleet_markdown() -> str:
    return textwrap.dedent("""\
        # Our Fleet

        ## Camper vans

        Camper vans sleep up to four people and include a kitchenette, bedding and a fridge.

        ## Cargo vans

        Cargo vans offer eleven cubic metres of load space and a loading ramp for moving house.

        ## Passenger vans

        Passenger vans seat nine people and suit group trips and airport transfers.
    """)


@pytest.fixture
def faq_documents(faq_markdown: str, fleet_markdown: str) -> list[SourceDocument]:
    return [
        SourceDocument(source_id="faq.md", text=faq_markdown),
        SourceDocument(source_id="fleet.md", text=fleet_markdown),
    ]


# ---------------------------------------------------------------------------
# Directory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def docs_dir(tmp_path: Path, faq_markdown: str, fleet_markdown: str) -> Path:
    """A corpus directory with two markdown files and one ignored file."""
    d = tmp_path / "faq-and-docs"
    d.mkdir()
    (d / "faq.md").write_text(faq_markdown, encoding="utf-8")
    (d / "fleet.md").write_text(fleet_markdown, encoding="utf-8")
    (d / "notes.txt").write_text("Internal notes, not part of the corpus.", encoding="utf-8")
    return d


@pytest.fixture
def settings_for():
    """Build ``Settings`` pointing at a given document directory."""

    def _make(directory: Path | str) -> Settings:
        settings = Settings()
        settings.documents.directory = str(directory)
        return settings

    return _make
