"""Data model of the cellar sample service: accounts, bottles and admins."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


class NoRowError(LookupError):
    """Raised when a lookup finds nothing."""

    def __init__(self, message: str = "no rows in result set"):
        super().__init__(message)


class NameInvalidError(ValueError):
    """Raised when an account name is empty."""

    def __init__(self, message: str = "name is empty"):
        super().__init__(message)


@dataclass
class Account:
    """An account with an id, a name and a UUID."""

    id: int = 0
    name: str = ""
    uuid: UUID = field(default_factory=lambda: UUID(int=0))

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the account."""
        return {"id": self.id, "name": self.name, "uuid": str(self.uuid)}


@dataclass
class AddAccount:
    """The body of a request that creates an account."""

    name: str = ""

    def validate(self) -> None:
        """Raise NameInvalidError when the name is empty."""
        if not self.name:
            raise NameInvalidError()


@dataclass
class UpdateAccount:
    """The body of a request that renames an account."""

    name: str = ""

    def validate(self) -> None:
        """Raise NameInvalidError when the name is empty."""
        if not self.name:
            raise NameInvalidError()


@dataclass
class Admin:
    """An administrator."""

    id: int = 0
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the admin."""
        return {"id": self.id, "name": self.name}


@dataclass
class Bottle:
    """A bottle owned by an account."""

    id: int = 0
    name: str = ""
    account: Account = field(default_factory=Account)

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the bottle, with its account nested."""
        return {"id": self.id, "name": self.name, "account": self.account.to_dict()}


@dataclass
class HTTPError:
    """The JSON body sent with an error status."""

    code: int = 400
    message: str = "status bad request"

    def to_dict(self) -> dict[str, Any]:
        """The JSON form of the error."""
        return {"code": self.code, "message": self.message}


class AccountStore:
    """An in-memory table of accounts, seeded with three rows."""

    def __init__(self):
        self._accounts: list[Account] = [
            Account(id=1, name="account_1"),
            Account(id=2, name="account_2"),
            Account(id=3, name="account_3"),
        ]
        self._max_id = 3

    def all_accounts(self, q: str = "") -> list[Account]:
        """Every account, or those whose name equals ``q`` when it is given."""
        return [dataclasses.replace(a) for a in self._accounts if not q or a.name == q]

    def account_one(self, account_id: int) -> Account:
        """The account with ``account_id``; raises NoRowError when missing."""
        for account in self._accounts:
            if account.id == account_id:
                return dataclasses.replace(account)
        raise NoRowError()

    def insert(self, account: Account) -> int:
        """Store a copy of ``account`` under the next id and a generated name; return the id."""
        self._max_id += 1
        stored = dataclasses.replace(account, id=self._max_id, name=f"account_{self._max_id}")
        self._accounts.append(stored)
        return self._max_id

    def delete(self, account_id: int) -> None:
        """Remove the account with ``account_id``; raises NoRowError when missing."""
        for pos, account in enumerate(self._accounts):
            if account.id == account_id:
                del self._accounts[pos]
                return
        raise NoRowError(f"account id={account_id} is not found")

    def update(self, account: Account) -> None:
        """Rename the stored account with the same id; raises NoRowError when missing."""
        for stored in self._accounts:
            if stored.id == account.id:
                stored.name = account.name
                return
        raise NoRowError(f"account id={account.id} is not found")


_BOTTLES: tuple[Bottle, ...] = (
    Bottle(id=1, name="bottle_1", account=Account(id=1, name="accout_1")),
    Bottle(id=2, name="bottle_2", account=Account(id=2, name="accout_2")),
    Bottle(id=3, name="bottle_3", account=Account(id=3, name="accout_3")),
)


def _copy_bottle(bottle: Bottle) -> Bottle:
    return dataclasses.replace(bottle, account=dataclasses.replace(bottle.account))


def bottles_all() -> list[Bottle]:
    """Every bottle."""
    return [_copy_bottle(b) for b in _BOTTLES]


def bottle_one(bottle_id: int) -> Bottle:
    """The bottle with ``bottle_id``; raises NoRowError when missing."""
    for bottle in _BOTTLES:
        if bottle.id == bottle_id:
            return _copy_bottle(bottle)
    raise NoRowError()