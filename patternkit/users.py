"""Users, groups and an interactive command shell that manages them."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TextIO

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

BANNER = (
    "Start program\n"
    "Possible commands:\n"
    " 1. createUser {userId} {username} {…additional info…}\n"
    " 2. deleteUser {userId}\n"
    " 3. allUsers\n"
    " 4. getUser {userId}\n"
    " 5. createGroup {groupId}\n"
    " 6. deleteGroup {groupId}\n"
    " 7. allGroups\n"
    " 8. getGroup {groupId}\n"
    " 9. addUserToGroup {userId} {groupId}\n"
    "10. removeUserFromGroup {userId} {groupId}\n"
    "11. exit (or quit)\n"
)


class UserError(Exception):
    """A user or group operation could not be carried out."""


@dataclass(eq=False)
class User:
    """A user, optionally attached to a group."""

    user_id: int
    username: str
    additional_info: str = ""
    group: Group | None = None

    def describe(self) -> str:
        """Multi-line description of the user."""
        lines = [
            f"User ID: {self.user_id}",
            f"Username: {self.username}",
            f"Additional Info: {self.additional_info}",
        ]
        if self.group is not None:
            lines.append(f"Group ID: {self.group.group_id}")
        else:
            lines.append("Not in a group")
        return "\n".join(lines) + "\n"


@dataclass(eq=False)
class Group:
    """A group holding references to its users."""

    group_id: int
    users: list[User] = field(default_factory=list)

    def _position(self, user: User) -> int | None:
        return next((i for i, member in enumerate(self.users) if member is user), None)

    def add_user(self, user: User) -> None:
        """Add ``user`` unless already a member, and point it at this group."""
        if user is None:
            raise ValueError("User cannot be None.")
        if self._position(user) is None:
            self.users.append(user)
            user.group = self

    def remove_user(self, user: User) -> None:
        """Remove ``user`` if it is a member and detach it from any group."""
        if user is None:
            raise ValueError("User cannot be None.")
        position = self._position(user)
        if position is not None:
            del self.users[position]
            user.group = None

    def describe(self) -> str:
        """Multi-line description of the group and its users."""
        parts = [f"Group ID: {self.group_id}\n", "Users:\n"]
        for user in self.users:
            parts.append(user.describe())
            parts.append("---\n")
        return "".join(parts)


class UserManager:
    """Registry of users and groups keyed by their ids."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._groups: dict[int, Group] = {}

    def _user(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise UserError("User not found.") from None

    def _group(self, group_id: int) -> Group:
        try:
            return self._groups[group_id]
        except KeyError:
            raise UserError("Group not found.") from None

    def create_user(self, user_id: int, username: str, additional_info: str = "") -> User:
        """Register a new user; the id must be unused."""
        if user_id in self._users:
            raise UserError("User with this ID already exists.")
        user = User(user_id, username, additional_info)
        self._users[user_id] = user
        return user

    def delete_user(self, user_id: int) -> None:
        """Remove a user from every group and from the registry."""
        user = self._user(user_id)
        for group in self._groups.values():
            group.remove_user(user)
        del self._users[user_id]

    def all_users(self) -> list[User]:
        """Every registered user."""
        return list(self._users.values())

    def get_user(self, user_id: int) -> User:
        """The user with ``user_id``."""
        return self._user(user_id)

    def create_group(self, group_id: int) -> Group:
        """Register a new group; the id must be unused."""
        if group_id in self._groups:
            raise UserError("Group with this ID already exists.")
        group = Group(group_id)
        self._groups[group_id] = group
        return group

    def delete_group(self, group_id: int) -> None:
        """Detach every member of the group and drop the group."""
        group = self._group(group_id)
        for user in group.users:
            user.group = None
        del self._groups[group_id]

    def all_groups(self) -> list[Group]:
        """Every registered group."""
        return list(self._groups.values())

    def get_group(self, group_id: int) -> Group:
        """The group with ``group_id``."""
        return self._group(group_id)

    def add_user_to_group(self, user_id: int, group_id: int) -> None:
        """Make the user a member of the group."""
        user = self._user(user_id)
        group = self._group(group_id)
        group.add_user(user)

    def remove_user_from_group(self, user_id: int, group_id: int) -> None:
        """Take the user out of the group."""
        user = self._user(user_id)
        group = self._group(group_id)
        group.remove_user(user)


def _split(line: str) -> list[str]:
    """Split on single spaces; a trailing separator yields no empty token."""
    if not line:
        return []
    tokens = line.split(" ")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def _parse_int(text: str) -> int:
    """Read a leading 32-bit integer, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("stoi")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError("stoi")
    return value


class CommandShell:
    """Reads text commands and applies them to a ``UserManager``."""

    def __init__(
        self,
        manager: UserManager | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.manager = manager if manager is not None else UserManager()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "createUser": self._create_user,
            "deleteUser": self._delete_user,
            "allUsers": self._all_users,
            "getUser": self._get_user,
            "createGroup": self._create_group,
            "deleteGroup": self._delete_group,
            "allGroups": self._all_groups,
            "getGroup": self._get_group,
            "addUserToGroup": self._add_user_to_group,
            "removeUserFromGroup": self._remove_user_from_group,
        }

    def _out(self, text: str) -> None:
        self.stdout.write(text)

    def _usage(self, text: str) -> None:
        self.stderr.write(f"Usage: {text}\n")

    def execute(self, line: str) -> bool:
        """Run one command line; returns False when the shell should stop."""
        parts = _split(line)
        command = parts[0] if parts else ""
        if command in ("exit", "quit"):
            return False
        handler = self._handlers.get(command)
        if handler is None:
            self._out("Unknown command.\n")
            return True
        try:
            handler(parts)
        except (UserError, ValueError) as exc:
            self.stderr.write(f"Error: {exc}\n")
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Print the banner, then execute lines until exhausted or told to stop."""
        self._out(BANNER)
        for line in lines:
            self._out("> ")
            if not self.execute(line.rstrip("\r\n")):
                break
        else:
            self._out("> ")

    def _create_user(self, parts: list[str]) -> None:
        if len(parts) < 3:
            self._usage("createUser {userId} {username} {…additional info…}")
            return
        user_id = _parse_int(parts[1])
        self.manager.create_user(user_id, parts[2], " ".join(parts[3:]))
        self._out("User created successfully.\n")

    def _delete_user(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self._usage("deleteUser {userId}")
            return
        self.manager.delete_user(_parse_int(parts[1]))
        self._out("User deleted successfully.\n")

    def _all_users(self, parts: list[str]) -> None:
        users = self.manager.all_users()
        if not users:
            self._out("No users found.\n")
            return
        for user in users:
            self._out(user.describe())
            self._out("---\n")

    def _get_user(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self._usage("getUser {userId}")
            return
        self._out(self.manager.get_user(_parse_int(parts[1])).describe())

    def _create_group(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self._usage("createGroup {groupId}")
            return
        self.manager.create_group(_parse_int(parts[1]))
        self._out("Group created successfully.\n")

    def _delete_group(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self._usage("deleteGroup {groupId}")
            return
        self.manager.delete_group(_parse_int(parts[1]))
        self._out("Group deleted successfully.\n")

    def _all_groups(self, parts: list[str]) -> None:
        groups = self.manager.all_groups()
        if not groups:
            self._out("No groups found.\n")
            return
        for group in groups:
            self._out(group.describe())
            self._out("===\n")

    def _get_group(self, parts: list[str]) -> None:
        if len(parts) != 2:
            self._usage("getGroup {groupId}")
            return
        self._out(self.manager.get_group(_parse_int(parts[1])).describe())

    def _add_user_to_group(self, parts: list[str]) -> None:
        if len(parts) != 3:
            self._usage("addUserToGroup {userId} {groupId}")
            return
        user_id = _parse_int(parts[1])
        group_id = _parse_int(parts[2])
        self.manager.add_user_to_group(user_id, group_id)
        self._out("User added to group successfully.\n")

    def _remove_user_from_group(self, parts: list[str]) -> None:
        if len(parts) != 3:
            self._usage("removeUserFromGroup {userId} {groupId}")
            return
        user_id = _parse_int(parts[1])
        group_id = _parse_int(parts[2])
        self.manager.remove_user_from_group(user_id, group_id)
        self._out("User removed from group successfully.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell on standard input."""
    CommandShell(UserManager()).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())