from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import BaseModel

from resource_id.kernel.ids import ResourceID
from resource_id.kernel.serialization import json_dumps_canonical, json_loads, to_jsonable
from resource_id.kernel.ulid import Ulid

LOW = "01ARZ3NDEKTSV4RRFFQ69G5FAV"


@dataclass(frozen=True)
class Owner:
    id: ResourceID
    name: str


class Account(BaseModel):
    id: ResourceID


@pytest.mark.unit
def test_to_jsonable_renders_identifiers_as_bare_strings():
    rid = ResourceID.from_str("USER" + LOW)
    assert to_jsonable(rid) == "USER" + LOW
    assert to_jsonable(Ulid.from_str(LOW)) == LOW


@pytest.mark.unit
def test_to_jsonable_walks_containers_and_dataclasses():
    rid = ResourceID.from_str("USER" + LOW)
    payload = {"owners": [Owner(id=rid, name="a")], "ids": (rid,)}
    assert to_jsonable(payload) == {
        "owners": [{"id": "USER" + LOW, "name": "a"}],
        "ids": ["USER" + LOW],
    }


@pytest.mark.unit
def test_to_jsonable_handles_pydantic_models():
    rid = ResourceID.from_str("ACCT" + LOW)
    assert to_jsonable(Account(id=rid)) == {"id": "ACCT" + LOW}


@pytest.mark.unit
def test_to_jsonable_handles_datetime_with_z_suffix():
    dt = datetime(2026, 2, 10, 12, 0, 0, tzinfo=timezone.utc)
    assert to_jsonable(dt) == "2026-02-10T12:00:00Z"


@pytest.mark.unit
def test_to_jsonable_rejects_unknown_types():
    with pytest.raises(TypeError):
        to_jsonable(object())
    with pytest.raises(TypeError):
        to_jsonable(Decimal("10.50"))


@pytest.mark.unit
def test_json_dumps_canonical_round_trips_identifiers():
    rid = ResourceID("user")
    encoded = json_dumps_canonical({"b": 1, "a": rid})
    assert encoded == f'{{"a":"{rid}","b":1}}'
    assert ResourceID.from_str(json_loads(encoded)["a"]) == rid
