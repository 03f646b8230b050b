"""Claim status categories and the ordered classification policy.

Status labels are free text. A label is lower-cased and tested against an
ordered list of rules; the first rule that matches decides the category. The
order is the tie-break policy: a label such as ``"Pending Review"`` contains
both ``pending`` and ``review`` and classifies as pending because the pending
rule is evaluated first. Labels matching no rule are unclassified.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final


class ClaimStatusCategory(str, Enum):
    """Closed set of claim status buckets."""

    APPROVED = "approved"
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    REJECTED = "rejected"
    UNCLASSIFIED = "unclassified"


VISIBLE_CLAIM_STATUS_CATEGORIES: Final[tuple[ClaimStatusCategory, ...]] = (
    ClaimStatusCategory.APPROVED,
    ClaimStatusCategory.PENDING,
    ClaimStatusCategory.UNDER_REVIEW,
    ClaimStatusCategory.REJECTED,
)


@dataclass(frozen=True)
class ClaimStatusRule:
    """One classification rule evaluated against a lower-cased status label.

    Attributes:
        category: Category assigned when the predicate matches.
        predicate: Callable receiving the lower-cased label.
    """

    category: ClaimStatusCategory
    predicate: Callable[[str], bool]


def _domain_contains(fragment: str) -> Callable[[str], bool]:
    return lambda normalized_label: fragment in normalized_label


CLAIM_STATUS_CLASSIFICATION_RULES: Final[tuple[ClaimStatusRule, ...]] = (
    ClaimStatusRule(category=ClaimStatusCategory.APPROVED, predicate=_domain_contains("approved")),
    ClaimStatusRule(category=ClaimStatusCategory.PENDING, predicate=_domain_contains("pending")),
    ClaimStatusRule(category=ClaimStatusCategory.UNDER_REVIEW, predicate=_domain_contains("review")),
    ClaimStatusRule(category=ClaimStatusCategory.REJECTED, predicate=_domain_contains("reject")),
)


def domain_classify_claim_status(
    status: object,
    rules: tuple[ClaimStatusRule, ...] = CLAIM_STATUS_CLASSIFICATION_RULES,
) -> ClaimStatusCategory:
    """Classify one free-text status label into a claim status category.

    Args:
        status: Raw status label. Non-text values are treated as an empty label.
        rules: Ordered classification rules; the first match wins.

    Returns:
        ClaimStatusCategory: Matched category, or `UNCLASSIFIED` when no rule matches.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_label = status.lower() if isinstance(status, str) else ""
    for rule in rules:
        if rule.predicate(normalized_label):
            return rule.category
    return ClaimStatusCategory.UNCLASSIFIED
