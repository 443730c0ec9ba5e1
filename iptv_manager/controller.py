"""Top-level composition of the customer manager.

``ViewController`` owns the store and the view state and is the single
entry point the command line drives. It renders each view as plain text.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from iptv_manager.assistant import MessageResult, MessagingAssistant
from iptv_manager.editor import CustomerEditor
from iptv_manager.models import Customer, DashboardStats, MessageIntent, PaymentStatus, View
from iptv_manager.search import filter_customers
from iptv_manager.stats import compute_stats, days_until_due
from iptv_manager.store import CustomerStore

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Tem certeza que deseja remover este cliente?"

VIEW_TITLES = {
    View.OVERVIEW: "Visão Geral",
    View.RECORDS: "Gestão de Clientes",
    View.ABOUT: "Configurações",
}

ABOUT_TEXT = """\
Sobre o App
Este sistema foi desenvolvido para controle local de clientes IPTV.
Os dados são salvos em um arquivo local ({location}).
Faça cópias desse arquivo se quiser manter um backup dos clientes.

Mensagens com IA
Configure IPTV_AI_API_KEY para gerar cobranças, boas-vindas e promoções."""


class ViewController:
    """Owns the customer collection, the current view and the search term.

    Parameters
    ----------
    store : CustomerStore
        Collection owner; loaded by ``start``.
    assistant : MessagingAssistant
        Message drafting service.
    clock : Callable[[], datetime]
        Source of the current time for stats and defaults.
    """

    def __init__(
        self,
        store: CustomerStore,
        assistant: MessagingAssistant,
        clock: Callable[[], datetime] = datetime.now,
        storage_location: str = "armazenamento local",
    ) -> None:
        self.store = store
        self.assistant = assistant
        self.clock = clock
        self.storage_location = storage_location
        self.view = View.OVERVIEW
        self.search_term = ""

    def start(self) -> None:
        """Load the collection. Must run before anything reads it."""
        self.store.load()
        logger.info("Started with %d customers", len(self.store))

    def switch_view(self, view: View | str) -> None:
        self.view = View(view.upper() if isinstance(view, str) else view)

    def set_search(self, term: str) -> None:
        self.search_term = term

    # Queries

    def stats(self) -> DashboardStats:
        return compute_stats(self.store.customers, self.clock())

    def visible_customers(self) -> list[Customer]:
        return filter_customers(self.store.customers, self.search_term)

    # Mutations

    def open_editor(self, customer_id: str | None = None) -> CustomerEditor:
        """Editor in create mode, or in edit mode for ``customer_id``."""
        initial = self.store.get(customer_id) if customer_id is not None else None
        return CustomerEditor(initial, today=self.clock().date())

    def submit_editor(self, editor: CustomerEditor) -> Customer:
        return editor.submit(self.store)

    def delete_customer(self, customer_id: str, confirm: Callable[[str], bool]) -> bool:
        """Remove ``customer_id`` once ``confirm`` agrees. Returns whether it was removed."""
        customer = self.store.get(customer_id)
        if not confirm(f"{DELETE_PROMPT} ({customer.name})"):
            logger.info("Deletion of %s cancelled", customer_id)
            return False
        self.store.remove(customer_id)
        return True

    def request_message(self, customer_id: str, intent: MessageIntent | str) -> MessageResult:
        customer = self.store.get(customer_id)
        return self.assistant.generate_message(customer, MessageIntent(intent))

    # Rendering

    def render(self) -> str:
        title = VIEW_TITLES[self.view]
        header = f"{title}\n{'=' * len(title)}"
        if self.view == View.OVERVIEW:
            body = self._render_overview()
        elif self.view == View.RECORDS:
            body = self._render_records()
        else:
            body = ABOUT_TEXT.format(location=self.storage_location)
        return f"{header}\n{body}"

    def _render_overview(self) -> str:
        stats = self.stats()
        return "\n".join(
            [
                f"Total de Clientes:   {stats.total_customers}",
                f"Adimplentes:         {stats.active_customers}",
                f"Inadimplentes:       {stats.inactive_customers}",
                f"Receita Estimada:    {format_brl(stats.total_revenue)}",
                f"Vencendo em 5 dias:  {stats.expiring_soon}",
            ]
        )

    def _render_records(self) -> str:
        customers = self.visible_customers()
        if not customers:
            if self.search_term:
                return f"Nenhum cliente encontrado para '{self.search_term}'."
            return "Nenhum cliente encontrado. Adicione um novo cliente."

        now = self.clock()
        lines = [
            f"{'ID':<10} {'Cliente':<28} {'Telefone':<18} {'Plano':<6} {'Telas':>5} "
            f"{'Vencimento':<11} {'Status':<13} {'Valor':>10}",
        ]
        for c in customers:
            due = c.due_date.strftime("%d/%m/%Y")
            days = days_until_due(c, now)
            marker = "!" if c.payment_status == PaymentStatus.INADIMPLENTE else ("*" if 0 <= days <= 5 else " ")
            lines.append(
                f"{c.customer_id[:10]:<10} {c.name[:28]:<28} {c.phone[:18]:<18} {c.platform.value:<6} "
                f"{c.screen_count:>5} {due:<11} {c.payment_status.value:<13} "
                f"{format_brl(c.effective_revenue):>10} {marker}  [{c.id}]"
            )
        lines.append(f"{len(customers)} cliente(s). ! inadimplente, * vence em até 5 dias")
        return "\n".join(lines)


def format_brl(amount: Decimal) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,50``."""
    text = f"{amount:,.2f}"
    return "R$ " + text.replace(",", "_").replace(".", ",").replace("_", ".")
