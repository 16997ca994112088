# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Diagnosis domain models."""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class Diagnosis:
    issue: str
    severity: Severity
    recommendation: str

    def to_dict(self) -> dict[str, str]:
        return {
            "issue": self.issue,
            "severity": self.severity.value,
            "recommendation": self.recommendation,
        }
