"""Tests for the personal vault: obscured fields at rest, plaintext on read."""

from __future__ import annotations

import logging

import pytest

from db_stores import DECRYPTION_FAILED, PersonalVaultDB
from errors import ValidationError
from obfuscator import Obfuscator


def _raw(database, sql, *params):
    with database.session() as conn:
        return conn.execute(sql, params).fetchone()


class TestPersonalAccounts:
    def test_round_trip(self, vault_store):
        created = vault_store.create_personal_account(
            "Mail", "me@example.com", "s3cr3t!", website="https://mail.example.com",
        )
        assert created.password == "s3cr3t!"
        [account] = vault_store.get_personal_accounts()
        assert account.email == "me@example.com"
        assert account.password == "s3cr3t!"
        assert account.website == "https://mail.example.com"

    def test_only_password_obscured_at_rest(self, vault_store, database, obfuscator):
        created = vault_store.create_personal_account("Bank", "me@bank.example", "pässwörd", category="banking")
        row = _raw(database, "SELECT email, password, title FROM personal_accounts WHERE id=?", created.id)
        assert row["password"] != "pässwörd"
        assert row["password"] == obfuscator.obscure("pässwörd")
        assert row["email"] == "me@bank.example"
        assert row["title"] == "Bank"

    def test_validation(self, vault_store):
        with pytest.raises(ValidationError):
            vault_store.create_personal_account("Bad", "not-an-email", "pw")
        with pytest.raises(ValidationError):
            vault_store.create_personal_account("Bad", "me@example.com", "")

    def test_ordering_and_category(self, vault_store):
        vault_store.create_personal_account("Zeta", "z@example.com", "pw", category="work")
        vault_store.create_personal_account("Alpha", "a@example.com", "pw", category="work")
        vault_store.create_personal_account("Mid", "m@example.com", "pw", category="banking")
        assert [a.title for a in vault_store.get_personal_accounts()] == ["Mid", "Alpha", "Zeta"]
        work = vault_store.get_personal_accounts_by_category("work")
        assert [a.title for a in work] == ["Alpha", "Zeta"]

    def test_corrupt_row_degrades_to_sentinel(self, vault_store, database, caplog):
        vault_store.create_personal_account("Good", "good@example.com", "fine")
        with database.transaction() as conn:
            conn.execute(
                "INSERT INTO personal_accounts (title, email, password, category, created_at, updated_at) "
                "VALUES ('Broken', ?, '@@not base64@@', 'email', '', '')",
                ("broken@example.com",),
            )
        with caplog.at_level(logging.WARNING, logger="db_stores"):
            accounts = {a.title: a for a in vault_store.get_personal_accounts()}
        assert accounts["Good"].password == "fine"
        assert accounts["Broken"].password == DECRYPTION_FAILED
        assert accounts["Broken"].email == "broken@example.com"
        assert any("Could not decode" in r.getMessage() for r in caplog.records)

    def test_wrong_key_degrades(self, vault_store, database):
        vault_store.create_personal_account("Mail", "me@example.com", "é")
        other = PersonalVaultDB(database, Obfuscator(b"\x43"))
        [account] = other.get_personal_accounts()
        assert account.password != "é"


class TestPersonalInfo:
    def test_sensitive_round_trip(self, vault_store, database, obfuscator):
        info = vault_store.create_personal_info("Passport", "X1234567", category="documents", is_sensitive=True)
        assert info.is_sensitive is True
        row = _raw(database, "SELECT content, is_sensitive FROM personal_info WHERE id=?", info.id)
        assert row["content"] == obfuscator.obscure("X1234567")
        assert row["is_sensitive"] == 1
        [read] = vault_store.get_personal_info()
        assert read.content == "X1234567"

    def test_non_sensitive_stored_plain(self, vault_store, database):
        info = vault_store.create_personal_info("Shoe size", "43")
        row = _raw(database, "SELECT content FROM personal_info WHERE id=?", info.id)
        assert row["content"] == "43"
        assert vault_store.get_personal_info()[0].content == "43"

    def test_flag_decides_read_path(self, vault_store, database):
        # Plain text that happens to be valid base64 must not be decoded
        vault_store.create_personal_info("Code", "AwAB", is_sensitive=False)
        assert vault_store.get_personal_info()[0].content == "AwAB"

    def test_corrupt_sensitive_content(self, vault_store, database):
        with database.transaction() as conn:
            conn.execute(
                "INSERT INTO personal_info (title, content, category, is_sensitive, created_at, updated_at) "
                "VALUES ('Broken', 'A', 'general', 1, '', '')"
            )
        vault_store.create_personal_info("Fine", "ok", is_sensitive=True)
        by_title = {i.title: i.content for i in vault_store.get_personal_info()}
        assert by_title == {"Broken": DECRYPTION_FAILED, "Fine": "ok"}

    def test_by_category(self, vault_store):
        vault_store.create_personal_info("B", "b", category="contacts")
        vault_store.create_personal_info("A", "a", category="contacts")
        vault_store.create_personal_info("C", "c", category="identity")
        assert [i.title for i in vault_store.get_personal_info_by_category("contacts")] == ["A", "B"]
        assert [i.title for i in vault_store.get_personal_info()] == ["A", "B", "C"]
