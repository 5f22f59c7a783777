"""
Pytest Configuration and Fixtures

Shared fixtures and configuration for all tests.
"""

import pytest
import sys
from pathlib import Path

# Add backend directory to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from gaptracker.models.schemas import GapRecord, GapStatus  # noqa: E402
from gaptracker.services.similarity_engine import GapDocument  # noqa: E402


REFUND_TARGET_TEXT = "Refund confirmation email not sent to customer"


@pytest.fixture
def refund_target():
    """Target gap about a missing refund email"""
    return GapDocument(id=100, text=REFUND_TARGET_TEXT)


@pytest.fixture
def support_corpus():
    """
    Four candidate gaps; only #1 overlaps the refund target.

    'missing' appears in two documents, every other term in one.
    """
    return [
        GapDocument(id=1, text="Refund email confirmation missing for customers"),
        GapDocument(id=2, text="Login page throws error on submit"),
        GapDocument(id=3, text="Dashboard chart loads slowly"),
        GapDocument(id=4, text="Export button missing from reports page"),
    ]


@pytest.fixture
def gap_records():
    """Gap records as the record store would hand them over"""
    return [
        GapRecord(
            id=10,
            title="Refund confirmation email",
            description="not sent to customer after refund",
            status=GapStatus.PENDING_AI
        ),
        GapRecord(
            id=11,
            title="Refund confirmation email",
            description="not sent to customer after refund",
            status=GapStatus.CLOSED
        ),
        GapRecord(
            id=12,
            title="Refund email missing",
            description="customer never got refund confirmation",
            status=GapStatus.IN_PROGRESS
        ),
        GapRecord(
            id=13,
            title="Login page error",
            description="submit button throws server error",
            status=GapStatus.ASSIGNED
        ),
        GapRecord(
            id=14,
            title="Warehouse scanner offline",
            description="barcode scanner drops connection",
            status=GapStatus.NEEDS_REVIEW
        ),
    ]
