"""Tests for the command line interface."""

import argparse
from pathlib import Path

import pytest

from iptv_manager.assistant import MessagingAssistant
from iptv_manager.assistant.service import CONFIGURATION_MISSING_TEXT
from iptv_manager.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, build_parser, main, run
from iptv_manager.controller import ViewController
from iptv_manager.storage import CustomerRepository, KeyValueFile
from iptv_manager.store import CustomerStore


@pytest.fixture
def data_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for var in ("IPTV_AI_API_KEY", "API_KEY", "IPTV_DATA_FILE", "IPTV_STORAGE_KEY", "IPTV_AI_TEMPERATURE"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "storage.json"


def _stored(data_file: Path) -> list:
    return CustomerRepository(KeyValueFile(data_file)).load()


def _cli(data_file: Path, *args: str) -> int:
    return main(["--data-file", str(data_file), "--log-level", "WARNING", *args])


REQUIRED = ["--name", "Maria Souza", "--customer-id", "4021", "--phone", "(11) 98888-7777"]


class TestParser:
    def test_intent_is_case_insensitive(self) -> None:
        args = build_parser().parse_args(["message", "abc", "--intent", "promo"])
        assert args.intent == "PROMO"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    """End-to-end commands against a temporary data file."""

    def test_add_and_list(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _cli(data_file, "add", *REQUIRED, "--platform", "volt", "--price", "35,00") == EXIT_OK
        customers = _stored(data_file)
        assert len(customers) == 1
        assert customers[0].platform.value == "VOLT"

        assert _cli(data_file, "list", "-q", "maria") == EXIT_OK
        out = capsys.readouterr().out
        assert "Maria Souza" in out
        assert customers[0].id in out

    def test_add_without_name(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _cli(data_file, "add", "--customer-id", "1", "--phone", "11") == EXIT_INVALID
        assert "name" in capsys.readouterr().err
        assert _stored(data_file) == []

    def test_add_with_bad_price(self, data_file: Path) -> None:
        assert _cli(data_file, "add", *REQUIRED, "--price", "barato") == EXIT_INVALID
        assert _stored(data_file) == []

    def test_edit(self, data_file: Path) -> None:
        _cli(data_file, "add", *REQUIRED)
        customer_id = _stored(data_file)[0].id
        assert _cli(data_file, "edit", customer_id, "--status", "INADIMPLENTE", "--due-date", "01/04/2026") == EXIT_OK
        edited = _stored(data_file)[0]
        assert edited.payment_status.value == "INADIMPLENTE"
        assert str(edited.due_date) == "2026-04-01"
        assert edited.name == "Maria Souza"

    def test_edit_unknown(self, data_file: Path) -> None:
        assert _cli(data_file, "edit", "nope", "--name", "X") == EXIT_ERROR

    def test_delete_with_yes(self, data_file: Path) -> None:
        _cli(data_file, "add", *REQUIRED)
        customer_id = _stored(data_file)[0].id
        assert _cli(data_file, "delete", customer_id, "--yes") == EXIT_OK
        assert _stored(data_file) == []

    def test_delete_declined(self, data_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _cli(data_file, "add", *REQUIRED)
        customer_id = _stored(data_file)[0].id
        monkeypatch.setattr("builtins.input", lambda prompt: "n")
        assert _cli(data_file, "delete", customer_id) == EXIT_OK
        assert len(_stored(data_file)) == 1

    def test_seed_and_overview(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _cli(data_file, "seed", "--count", "5", "--seed", "42") == EXIT_OK
        assert len(_stored(data_file)) == 5
        capsys.readouterr()
        assert _cli(data_file, "overview") == EXIT_OK
        assert "Total de Clientes:   5" in capsys.readouterr().out

    def test_about(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _cli(data_file, "about") == EXIT_OK
        out = capsys.readouterr().out
        assert "Sobre o App" in out
        assert str(data_file) in out

    def test_message_without_key(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _cli(data_file, "add", *REQUIRED)
        customer_id = _stored(data_file)[0].id
        capsys.readouterr()
        assert _cli(data_file, "message", customer_id) == EXIT_ERROR
        assert CONFIGURATION_MISSING_TEXT in capsys.readouterr().out

    def test_corrupt_storage_starts_empty(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        KeyValueFile(data_file).set("iptv_customers", "not json")
        assert _cli(data_file, "list") == EXIT_OK
        assert "Nenhum cliente encontrado" in capsys.readouterr().out


class TestRunMessage:
    """Message command with a stubbed generator."""

    def test_whatsapp_link(self, repository, generator, make_customer, capsys: pytest.CaptureFixture[str]) -> None:
        customer = make_customer(phone="+55 (11) 98888-7777")
        repository.save([customer])
        controller = ViewController(CustomerStore(repository), MessagingAssistant(generator))
        args = argparse.Namespace(command="message", id=customer.id, intent="WELCOME", whatsapp=True, open=False)

        assert run(args, controller) == EXIT_OK
        out = capsys.readouterr().out
        assert generator.reply in out
        assert "https://wa.me/5511988887777?text=" in out

    def test_open_in_browser(self, repository, generator, make_customer, monkeypatch: pytest.MonkeyPatch) -> None:
        customer = make_customer()
        repository.save([customer])
        opened: list[str] = []
        monkeypatch.setattr("webbrowser.open", opened.append)
        controller = ViewController(CustomerStore(repository), MessagingAssistant(generator))
        args = argparse.Namespace(command="message", id=customer.id, intent="PROMO", whatsapp=False, open=True)

        assert run(args, controller) == EXIT_OK
        assert len(opened) == 1
        assert opened[0].startswith("https://wa.me/")
