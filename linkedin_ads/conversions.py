"""Offline conversion events: CSV parsing, hashing and batch upload."""

from __future__ import annotations

import csv
import hashlib
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable, Optional, Sequence

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)

_FORBIDDEN_HINT = (
    "(request 'Conversions API' in your LinkedIn Developer Portal app"
    " — the token lacks that product)"
)


class ConversionsAccessError(Exception):
    """The token cannot use the Conversions API."""


class ConversionBatchError(RuntimeError):
    """Every event of a batch failed."""

    def __init__(self, message: str, result: "BatchResult") -> None:
        super().__init__(message)
        self.result = result


@dataclass
class ConversionRecord:
    """One row of an offline conversion CSV."""

    email: str
    occurred_at: datetime = _ZERO_TIME
    value: str = ""
    currency: str = ""
    event_id: str = ""


@dataclass
class BatchResult:
    total: int = 0
    sent: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        return f"Done. Sent {self.sent}, failed {self.failed}.\n"


def hash_sha256_email(email: str) -> str:
    """Lower-case, trim and SHA-256 an email address, as hex."""
    canonical = email.lower().strip()
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def _parse_date(text: str) -> Optional[datetime]:
    match = _DATE.fullmatch(text)
    if not match:
        return None
    try:
        return datetime(*(int(g) for g in match.groups()), tzinfo=timezone.utc)
    except ValueError:
        return None


def _parse_rfc3339(text: str) -> Optional[datetime]:
    match = _RFC3339.fullmatch(text)
    if not match:
        return None
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micros = int((fraction or "0")[:6].ljust(6, "0"))
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            return None
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    try:
        parsed = datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz
        )
    except ValueError:
        return None
    return parsed.astimezone(timezone.utc)


def parse_conversion_time(text: str, now: Optional[datetime] = None) -> datetime:
    """Parse YYYY-MM-DD or RFC 3339 as UTC; empty text means now."""
    if text == "":
        return (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    parsed = _parse_date(text) or _parse_rfc3339(text)
    if parsed is None:
        raise ValueError(f'invalid time "{text}" (want YYYY-MM-DD or RFC3339)')
    return parsed


def _pick(index: dict[str, int], row: Sequence[str], key: str) -> Optional[str]:
    position = index.get(key)
    if position is None or position >= len(row):
        return None
    value = row[position].strip()
    return value or None


def read_conversion_csv(path: str) -> list[ConversionRecord]:
    """Read records from a CSV with header email, occurred_at[, value, currency, event_id]."""
    with open(path, newline="", encoding="utf-8") as handle:
        rows = [row for row in csv.reader(handle, skipinitialspace=True) if row]
    if not rows:
        raise ValueError("CSV has no rows")
    header, body = rows[0], rows[1:]
    for number, row in enumerate(body, start=2):
        if len(row) != len(header):
            raise ValueError(f"record on line {number}: wrong number of fields")
    index = {name.strip().lower(): position for position, name in enumerate(header)}
    for required in ("email", "occurred_at"):
        if required not in index:
            raise ValueError(f'CSV missing required column "{required}"')

    records = []
    for number, row in enumerate(body, start=2):
        record = ConversionRecord(email=row[index["email"]].strip())
        occurred = _pick(index, row, "occurred_at")
        if occurred is not None:
            try:
                record.occurred_at = parse_conversion_time(occurred)
            except ValueError as exc:
                raise ValueError(f"row {number}: {exc}") from exc
        record.value = _pick(index, row, "value") or ""
        record.currency = _pick(index, row, "currency") or ""
        record.event_id = _pick(index, row, "event_id") or ""
        records.append(record)
    return records


def _epoch_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def build_conversion_event(rule_id: str, record: ConversionRecord) -> dict[str, Any]:
    """Conversion event body with the rule wrapped as a partner-conversion URN."""
    if not record.email:
        raise ValueError("email required")
    event: dict[str, Any] = {
        "conversion": f"urn:lla:llaPartnerConversion:{rule_id}",
        "conversionHappenedAt": _epoch_millis(record.occurred_at),
        "user": {
            "userIds": [
                {"idType": "SHA256_EMAIL", "idValue": hash_sha256_email(record.email)}
            ]
        },
    }
    if record.value:
        event["conversionValue"] = {
            "currencyCode": record.currency or "USD",
            "amount": record.value,
        }
    if record.event_id:
        event["eventId"] = record.event_id
    return event


def decorate_conversions_error(error: Optional[BaseException]) -> Optional[BaseException]:
    """Add a product-access hint to 403/forbidden errors; others pass through."""
    if error is None:
        return None
    message = str(error)
    if "403" in message or "forbidden" in message.lower():
        decorated = ConversionsAccessError(f"{message} {_FORBIDDEN_HINT}")
        decorated.__cause__ = error
        return decorated
    return error


def send_conversion_batch(
    rule_id: str,
    records: Iterable[ConversionRecord],
    send: Callable[[dict[str, Any]], Any],
    log: Callable[[str], Any] = lambda line: None,
) -> BatchResult:
    """Send each record in turn, logging progress and carrying on past failures.

    Raises ConversionBatchError when every event failed.
    """
    items = list(records)
    result = BatchResult(total=len(items))
    for number, record in enumerate(items, start=1):
        try:
            event = build_conversion_event(rule_id, record)
        except ValueError as exc:
            line = f"row {number}: build: {exc}\n"
            result.failed += 1
            result.errors.append(line)
            log(line)
            continue
        try:
            send(event)
        except Exception as exc:  # noqa: BLE001 - a failed row must not stop the batch
            line = f"row {number}: send: {decorate_conversions_error(exc)}\n"
            result.failed += 1
            result.errors.append(line)
            log(line)
            continue
        result.sent += 1
        log(f"sent {result.sent}/{result.total} ({result.failed} errors)\n")
    if result.failed > 0 and result.sent == 0:
        raise ConversionBatchError(f"all {result.total} events failed", result)
    return result