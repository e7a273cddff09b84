"""
Tests for the BMI record store adapters

Both adapters must keep exactly one record per owner, last write wins.
"""
import pytest

from models import BmiRecord as BmiRecordRow
from services.bmi_evaluator import BmiRecord, Category
from services.record_store import InMemoryRecordStore, SqlAlchemyRecordStore


def make_record(owner="kherld.testnet", weight=52.0, height=127.0, bmi=32.24, category=Category.OBESE):
    return BmiRecord(owner=owner, weight=weight, height=height, bmi=bmi, category=category)


@pytest.fixture(params=["memory", "sqlalchemy"])
def store(request):
    if request.param == "memory":
        return InMemoryRecordStore()
    db_session = request.getfixturevalue("db_session")
    return SqlAlchemyRecordStore(db_session)


class TestRecordStore:

    def test_get_missing(self, store):
        assert store.get("nobody.testnet") is None

    def test_put_then_get(self, store):
        record = make_record()
        store.put(record.owner, record)
        assert store.get(record.owner) == record

    def test_put_overwrites(self, store):
        store.put("kherld.testnet", make_record())
        newer = make_record(weight=70.0, height=175.0, bmi=22.86, category=Category.NORMAL)
        store.put("kherld.testnet", newer)
        assert store.get("kherld.testnet") == newer

    def test_owners_are_independent(self, store):
        store.put("a.testnet", make_record(owner="a.testnet"))
        store.put("b.testnet", make_record(owner="b.testnet", bmi=20.0, category=Category.NORMAL))
        assert store.get("a.testnet").category == Category.OBESE
        assert store.get("b.testnet").category == Category.NORMAL

    def test_delete(self, store):
        store.put("kherld.testnet", make_record())
        assert store.delete("kherld.testnet") is True
        assert store.get("kherld.testnet") is None

    def test_delete_missing(self, store):
        assert store.delete("nobody.testnet") is False


class TestSqlAlchemyRecordStore:

    def test_overwrite_keeps_single_row(self, db_session):
        store = SqlAlchemyRecordStore(db_session)
        store.put("kherld.testnet", make_record())
        store.put("kherld.testnet", make_record(bmi=33.0))
        rows = db_session.query(BmiRecordRow).filter(BmiRecordRow.owner == "kherld.testnet").all()
        assert len(rows) == 1
        assert rows[0].bmi == 33.0
        assert rows[0].category == "Obese"


class TestInMemoryRecordStore:

    def test_len_counts_owners(self):
        store = InMemoryRecordStore()
        store.put("kherld.testnet", make_record())
        store.put("kherld.testnet", make_record(bmi=33.0))
        assert len(store) == 1
