"""Command line interface for iptv-manager.

Usage::

    iptv-manager overview
    iptv-manager list -q silva
    iptv-manager add --name "Maria Souza" --customer-id 4021 --phone "(11) 98888-7777"
    iptv-manager message <id> --intent REMINDER --whatsapp
"""

from __future__ import annotations

import argparse
import logging
import sys
import webbrowser
from pathlib import Path
from typing import Callable, Sequence

from iptv_manager import __version__
from iptv_manager.assistant import GenerationClient, MessagingAssistant, whatsapp_link
from iptv_manager.config import AppConfig
from iptv_manager.controller import ViewController
from iptv_manager.exceptions import (
    ConfigurationError,
    CustomerNotFoundError,
    IptvManagerError,
    StorageError,
    ValidationError,
)
from iptv_manager.generators import SampleCustomerGenerator
from iptv_manager.logging import setup_logging
from iptv_manager.models import MessageIntent, View
from iptv_manager.storage import CustomerRepository, KeyValueFile
from iptv_manager.store import CustomerStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID = 2

# CLI option dest -> editor field
FIELD_OPTIONS = {
    "name": "name",
    "customer_id": "customer_id",
    "phone": "phone",
    "platform": "platform",
    "status": "payment_status",
    "price": "plan_price",
    "discount": "discount",
    "screens": "screen_count",
    "app": "app_name",
    "bonus": "bonus",
    "signup_date": "signup_date",
    "due_date": "due_date",
}


def build_controller(config: AppConfig) -> ViewController:
    """Wire storage, store and assistant from configuration."""
    repository = CustomerRepository(
        KeyValueFile(config.storage.data_file),
        key=config.storage.storage_key,
    )
    assistant = MessagingAssistant(GenerationClient(config.assistant))
    return ViewController(
        CustomerStore(repository),
        assistant,
        storage_location=str(config.storage.data_file),
    )


def _add_field_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name")
    parser.add_argument("--customer-id", dest="customer_id", help="ID do cliente no painel")
    parser.add_argument("--phone")
    parser.add_argument("--platform", help="KRON ou VOLT")
    parser.add_argument("--status", help="ADIMPLENTE ou INADIMPLENTE")
    parser.add_argument("--price", help="valor do plano (ex: 29,90)")
    parser.add_argument("--discount")
    parser.add_argument("--screens", help="quantidade de telas")
    parser.add_argument("--app", help="aplicativo usado pelo cliente")
    parser.add_argument("--bonus")
    parser.add_argument("--signup-date", dest="signup_date", help="YYYY-MM-DD ou DD/MM/YYYY")
    parser.add_argument("--due-date", dest="due_date", help="YYYY-MM-DD ou DD/MM/YYYY")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iptv-manager",
        description="Gestão de clientes IPTV",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-file", type=Path, help="arquivo de armazenamento (padrão: IPTV_DATA_FILE)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("overview", help="métricas gerais")

    list_parser = sub.add_parser("list", help="listar clientes")
    list_parser.add_argument("-q", "--query", default="", help="buscar por nome, ID ou telefone")

    add_parser = sub.add_parser("add", help="novo cliente")
    _add_field_options(add_parser)

    edit_parser = sub.add_parser("edit", help="editar cliente")
    edit_parser.add_argument("id", help="identificador interno do cliente")
    _add_field_options(edit_parser)

    delete_parser = sub.add_parser("delete", help="remover cliente")
    delete_parser.add_argument("id")
    delete_parser.add_argument("-y", "--yes", action="store_true", help="não pedir confirmação")

    message_parser = sub.add_parser("message", help="gerar mensagem com IA")
    message_parser.add_argument("id")
    message_parser.add_argument(
        "--intent",
        type=str.upper,
        choices=[i.value for i in MessageIntent],
        default=MessageIntent.REMINDER.value,
    )
    message_parser.add_argument("--whatsapp", action="store_true", help="mostrar link do WhatsApp")
    message_parser.add_argument("--open", action="store_true", help="abrir o WhatsApp no navegador")

    sub.add_parser("about", help="sobre o app")

    seed_parser = sub.add_parser("seed", help="adicionar clientes de exemplo")
    seed_parser.add_argument("--count", type=int, default=10)
    seed_parser.add_argument("--seed", type=int, default=None)

    return parser


def _ask(prompt: str) -> bool:
    answer = input(f"{prompt} [s/N] ")
    return answer.strip().lower() in ("s", "sim", "y", "yes")


def _editor_fields(args: argparse.Namespace) -> dict[str, str]:
    return {
        field: getattr(args, option)
        for option, field in FIELD_OPTIONS.items()
        if getattr(args, option, None) is not None
    }


def run(
    args: argparse.Namespace,
    controller: ViewController,
    confirm: Callable[[str], bool] = _ask,
    out=None,
) -> int:
    """Execute one parsed command against ``controller``."""
    out = out or sys.stdout
    controller.start()

    if args.command in ("overview", "about"):
        controller.switch_view(View.OVERVIEW if args.command == "overview" else View.ABOUT)
        print(controller.render(), file=out)
        return EXIT_OK

    if args.command == "list":
        controller.switch_view(View.RECORDS)
        controller.set_search(args.query)
        print(controller.render(), file=out)
        return EXIT_OK

    if args.command in ("add", "edit"):
        editor = controller.open_editor(args.id if args.command == "edit" else None)
        editor.update(**_editor_fields(args))
        customer = controller.submit_editor(editor)
        action = "atualizado" if args.command == "edit" else "salvo"
        print(f"Cliente {customer.name} {action} [{customer.id}]", file=out)
        return EXIT_OK

    if args.command == "delete":
        removed = controller.delete_customer(args.id, (lambda _: True) if args.yes else confirm)
        print("Cliente removido." if removed else "Remoção cancelada.", file=out)
        return EXIT_OK

    if args.command == "message":
        result = controller.request_message(args.id, args.intent)
        print(result.text, file=out)
        if result.ok and (args.whatsapp or args.open):
            customer = controller.store.get(args.id)
            link = whatsapp_link(customer.phone, result.text)
            print(f"\n{link}", file=out)
            if args.open:
                webbrowser.open(link)
        return EXIT_OK if result.ok else EXIT_ERROR

    if args.command == "seed":
        generator = SampleCustomerGenerator(seed=args.seed, today=controller.clock().date())
        for customer in generator.generate_batch(args.count):
            controller.store.add(customer)
        print(f"{args.count} clientes de exemplo adicionados.", file=out)
        return EXIT_OK

    raise IptvManagerError(f"Unknown command {args.command!r}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ConfigurationError as e:
        print(f"Erro de configuração: {e}", file=sys.stderr)
        return EXIT_INVALID
    if args.data_file is not None:
        config.storage.data_file = args.data_file
    if args.log_level:
        config.log_level = args.log_level
    setup_logging(config.log_level, config.log_format)

    try:
        return run(args, build_controller(config))
    except ValidationError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return EXIT_INVALID
    except CustomerNotFoundError as e:
        print(f"Erro: {e}", file=sys.stderr)
        return EXIT_ERROR
    except StorageError as e:
        logger.error("Storage failure: %s", e)
        print(f"Erro ao salvar os dados: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
