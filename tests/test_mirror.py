import json

import pytest

from payment_server.modules.payments import Payment
from payment_server.services.mirror import MirrorWriteError, PaymentMirror


def test_write_produces_pretty_printed_array(tmp_path):
    mirror = PaymentMirror(tmp_path / "payments.json")

    mirror.write([Payment(id=1, amount=100.5, currency="USD")])

    text = (tmp_path / "payments.json").read_text(encoding="utf-8")
    assert text == json.dumps([{"id": 1, "amount": 100.5, "currency": "USD"}], indent=2)


def test_write_replaces_previous_snapshot(tmp_path):
    mirror = PaymentMirror(tmp_path / "payments.json")
    mirror.write([Payment(id=1, amount=1.0, currency="USD"), Payment(id=2, amount=2.0, currency="EUR")])

    mirror.write([Payment(id=2, amount=2.0, currency="EUR")])

    assert mirror.read() == [{"id": 2, "amount": 2.0, "currency": "EUR"}]
    assert not (tmp_path / ".payments.json.tmp").exists()


def test_write_creates_missing_directories(tmp_path):
    mirror = PaymentMirror(tmp_path / "nested" / "dir" / "payments.json")

    mirror.write([])

    assert mirror.read() == []


def test_write_failure_raises_mirror_write_error(tmp_path):
    target = tmp_path / "payments.json"
    target.mkdir()
    mirror = PaymentMirror(target)

    with pytest.raises(MirrorWriteError):
        mirror.write([Payment(id=1, amount=1.0, currency="USD")])

    assert target.is_dir()


@pytest.mark.asyncio
async def test_write_async_runs_the_same_write(tmp_path):
    mirror = PaymentMirror(tmp_path / "payments.json")

    await mirror.write_async(iter([Payment(id=7, amount=-50.0, currency="XYZ")]))

    assert mirror.read() == [{"id": 7, "amount": -50.0, "currency": "XYZ"}]
