"""libotp.totp -- time-based one-time passwords (RFC 6238)."""

from __future__ import annotations

import dataclasses
import datetime
import hmac
import logging
from typing import TYPE_CHECKING, Union

from libotp._utils.validation import validate_positive
from libotp.clock import SystemClock
from libotp.errors import ConfigurationError
from libotp.hotp import MAX_COUNTER

if TYPE_CHECKING:
    from libotp.clock import Clock
    from libotp.hotp import PasswordGenerator

__all__ = ["TimeSlotPolicy", "TimeWindowValidator"]

log = logging.getLogger(__name__)

Candidate = Union[int, str]

_ONE_MILLISECOND = datetime.timedelta(milliseconds=1)


def _as_millis(duration: datetime.timedelta | int) -> int:
    if isinstance(duration, datetime.timedelta):
        return duration // _ONE_MILLISECOND
    return duration


@dataclasses.dataclass(frozen=True)
class TimeSlotPolicy:
    """Length of a time slot, and the number of slots accepted on each side of the current one."""

    slot_millis: int
    variance: int

    def __post_init__(self) -> None:
        validate_positive(self.slot_millis, "slot duration")
        validate_positive(self.variance, "variance")

    def slot_at(self, now_millis: int) -> int:
        if now_millis < 0:
            raise ValueError("time must be >= 0")
        return now_millis // self.slot_millis

    def window(self, slot: int) -> range:
        """
        slots to check around ``slot``, ordered from oldest to newest.
        slots outside of the unsigned 64 bit counter range are left out.
        """
        start = max(slot - self.variance, 0)
        end = min(slot + self.variance, MAX_COUNTER)
        return range(start, end + 1)


class TimeWindowValidator:
    """
    Generates and validates time-based passwords for :class:`~libotp.hotp.PasswordGenerator` instances.

    The settings held by this class are system parameters: there should be one
    instance per timing policy in use, shared by every generator it applies to.

    :param slot_duration:
        length of the period one password stays valid,
        as :class:`!datetime.timedelta` or integer milliseconds. Defaults to 30 seconds.

    :param variance:
        number of slots before and after the current slot that are also accepted.
        This compensates for clock differences between the two parties.

    :param clock:
        source of the current time, defaults to :class:`~libotp.clock.SystemClock`.

    :raises ~libotp.errors.ConfigurationError:
        if the slot duration or variance is not positive.
    """

    def __init__(
        self,
        slot_duration: datetime.timedelta | int = datetime.timedelta(seconds=30),
        variance: int = 1,
        clock: Clock | None = None,
    ) -> None:
        if slot_duration is None:
            raise ConfigurationError("slot duration must be specified")
        self._policy = TimeSlotPolicy(slot_millis=_as_millis(slot_duration), variance=variance)
        self._clock = clock or SystemClock()

    @property
    def policy(self) -> TimeSlotPolicy:
        return self._policy

    @property
    def slot_duration(self) -> datetime.timedelta:
        return datetime.timedelta(milliseconds=self._policy.slot_millis)

    @property
    def variance(self) -> int:
        return self._policy.variance

    def current_slot(self) -> int:
        return self._policy.slot_at(self._clock.now_millis())

    def generate_password(self, generator: PasswordGenerator) -> int:
        """Generates the currently valid password."""
        return generator.generate_password(self.current_slot())

    def generate_password_string(self, generator: PasswordGenerator) -> str:
        """
        Generates the currently valid password as a string,
        left-padded with zeros if necessary.
        """
        return generator.generate_password_string(self.current_slot())

    def find_slot(self, candidate: Candidate, generator: PasswordGenerator) -> int | None:
        """
        Returns the slot within the tolerance window whose password matches ``candidate``,
        or ``None`` if no slot matches.

        :arg candidate:
            password as an integer, or as a decimal string.
        """
        token = _normalize_candidate(candidate, generator)
        current = self.current_slot()
        if token is None:
            return None
        window = self._policy.window(current)
        for slot in window:
            if hmac.compare_digest(token, generator.generate_password_string(slot).encode("ascii")):
                log.debug("password matched slot %d (current slot %d)", slot, current)
                return slot
        log.debug(
            "password did not match any slot in [%d, %d]",
            window.start,
            window.stop - 1,
        )
        return None

    def validate(self, candidate: Candidate, generator: PasswordGenerator) -> bool:
        """
        Validates that the given password is valid for the current slot,
        or one of the slots within :attr:`variance` of it.
        """
        return self.find_slot(candidate, generator) is not None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"(slot_millis={self._policy.slot_millis}, variance={self._policy.variance})"
        )


def _normalize_candidate(candidate: Candidate, generator: PasswordGenerator) -> bytes | None:
    if isinstance(candidate, bool):
        raise TypeError("password must be an int or str, not bool")
    if isinstance(candidate, int):
        if not 0 <= candidate < generator.modulus:
            return None
        return generator.format_password(candidate).encode("ascii")
    if isinstance(candidate, str):
        return candidate.strip().encode("utf-8")
    msg = f"password must be an int or str, not {type(candidate).__name__}"
    raise TypeError(msg)
