# backend/tests/test_models_account.py
from inquiry_desk.models.account import Account


def test_account_has_required_fields():
    assert hasattr(Account, "id")
    assert hasattr(Account, "email")
    assert hasattr(Account, "first_name")
    assert hasattr(Account, "last_name")
    assert hasattr(Account, "password_hash")


def test_account_email_is_unique():
    assert Account.__table__.c.email.unique is True
