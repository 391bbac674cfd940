"""Target path canonicalization and field discovery."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .exceptions import InvalidTargetError

if TYPE_CHECKING:
    from .ast import Target
    from .policy import FieldPolicy

logger = logging.getLogger(__name__)

INVALID_SEGMENT = re.compile(r"[\"{};,\[\]:()'*>#~@&%?`]|-{2,}")


class FieldResolver:
    """
    Turns targets into dotted query-document keys for one conversion run.

    Every resolved target is checked against the policy first, and its
    top-level field is recorded in :attr:`fields` the first time it is
    seen.
    """

    def __init__(self, policy: FieldPolicy) -> None:
        self._policy = policy
        self._seen: set[str] = set()
        self.fields: list[str] = []

    def resolve(self, target: Target) -> str:
        """
        Return the canonical key for *target* (``("foo", "bar")`` → ``foo.bar``).

        Raises:
            DeniedFieldError: The target's field is denied by the policy.
            NonallowedFieldError: The target's field is outside the allow list.
            InvalidTargetError: A path segment contains an illegal character.
        """
        self._policy.check(target.field)

        segments = [str(segment) for segment in target.path]
        for segment in segments:
            if INVALID_SEGMENT.search(segment):
                raise InvalidTargetError(target)

        if target.field not in self._seen:
            self._seen.add(target.field)
            self.fields.append(target.field)
            logger.debug("Discovered field %s", target.field)

        return ".".join(segments)

    def has_field(self, field: str) -> bool:
        return field in self._seen
