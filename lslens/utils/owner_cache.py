import logging
import os
from typing import Callable, Dict, Optional


Resolver = Callable[[int], str]


def system_user_name(uid: int) -> str:
    """Look up a user name, falling back to the numeric id"""
    if os.name == 'nt':
        return str(uid)
    import pwd
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        logging.debug(f"No user entry for uid {uid}")
        return str(uid)


def system_group_name(gid: int) -> str:
    """Look up a group name, falling back to the numeric id"""
    if os.name == 'nt':
        return str(gid)
    import grp
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        logging.debug(f"No group entry for gid {gid}")
        return str(gid)


class OwnerCache:
    """Cache of owner and group names, resolved at most once per id"""

    def __init__(
        self,
        user_resolver: Optional[Resolver] = None,
        group_resolver: Optional[Resolver] = None,
    ):
        self._users: Dict[int, str] = {}
        self._groups: Dict[int, str] = {}
        self.user_resolver = user_resolver or system_user_name
        self.group_resolver = group_resolver or system_group_name

    def populate_user(self, uid: int, name: str) -> None:
        self._users[uid] = name

    def populate_group(self, gid: int, name: str) -> None:
        self._groups[gid] = name

    def lookup_user(self, uid: int) -> Optional[str]:
        return self._users.get(uid)

    def lookup_group(self, gid: int) -> Optional[str]:
        return self._groups.get(gid)

    def resolve_user(self, uid: int) -> str:
        """Cached user name, asking the resolver on a miss"""
        name = self._users.get(uid)
        if name is None:
            name = self.user_resolver(uid)
            self._users[uid] = name
        return name

    def resolve_group(self, gid: int) -> str:
        """Cached group name, asking the resolver on a miss"""
        name = self._groups.get(gid)
        if name is None:
            name = self.group_resolver(gid)
            self._groups[gid] = name
        return name

    def clear(self) -> None:
        self._users.clear()
        self._groups.clear()
