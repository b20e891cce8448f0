"""
Uid to display-name resolvers.
"""

import logging
from typing import List

from ..validation import NameResolutionError
from .base import AbstractNameResolver

logger = logging.getLogger(__name__)


class PasswdNameResolver(AbstractNameResolver):
    """
    Resolves uids through the system user database.

    Uids without a passwd entry are returned as empty strings.
    """

    def get_names_for_uids(self, uids: List[int]) -> List[str]:
        try:
            import pwd
        except ImportError as e:
            raise NameResolutionError("user database is not available on this platform") from e

        names: List[str] = []
        for uid in uids:
            try:
                names.append(pwd.getpwuid(uid).pw_name)
            except KeyError:
                names.append("")
        logger.debug(f"Resolved {sum(1 for n in names if n)} of {len(uids)} uid names")
        return names


class NullNameResolver(AbstractNameResolver):
    """Resolver that never resolves anything; uids keep their numeric names."""

    def get_names_for_uids(self, uids: List[int]) -> List[str]:
        return ["" for _ in uids]
