"""Continuous-integration platform detection."""

from enum import Enum
from typing import Mapping, Tuple


class CIPlatform(str, Enum):
    """CI platforms recognized from their environment signal variable."""

    NONE = "none"
    GITLAB = "gitlab"
    GITHUB = "github"
    TRAVIS = "travis"
    CIRCLECI = "circleci"

    def __str__(self) -> str:
        return self.value


# Checked in order; the first signal set to "true" wins when several are present.
CI_SIGNALS: Tuple[Tuple[str, str, CIPlatform], ...] = (
    ("GITLAB_CI", "true", CIPlatform.GITLAB),
    ("GITHUB_ACTIONS", "true", CIPlatform.GITHUB),
    ("TRAVIS", "true", CIPlatform.TRAVIS),
    ("CIRCLECI", "true", CIPlatform.CIRCLECI),
)


def detect(env: Mapping[str, str]) -> CIPlatform:
    """Detect the active CI platform from an environment snapshot.

    Args:
        env: Environment snapshot to inspect.

    Returns:
        CIPlatform: The first platform whose signal variable equals ``"true"``,
        or ``CIPlatform.NONE``.
    """
    for variable, expected, platform in CI_SIGNALS:
        if env.get(variable) == expected:
            return platform
    return CIPlatform.NONE
