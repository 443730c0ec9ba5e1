"""Prompt construction for customer messages."""

from decimal import Decimal

from iptv_manager.models import Customer, MessageIntent


def _brl(amount: Decimal) -> str:
    return f"R$ {amount:.2f}"


def _reminder(customer: Customer) -> str:
    return f"""
Crie uma mensagem curta, educada e profissional para WhatsApp.
O cliente {customer.name} está com o pagamento {customer.payment_status.value}.
O vencimento é/foi em {customer.due_date.strftime('%d/%m/%Y')}.
O valor do plano é {_brl(customer.plan_price)}.
Plataforma: {customer.platform.value}.
Se estiver Inadimplente, cobre suavemente. Se estiver perto do vencimento, apenas lembre.
Use emojis relacionados a TV/Filmes.
"""


def _welcome(customer: Customer) -> str:
    return f"""
Crie uma mensagem de boas-vindas animada para o cliente {customer.name}.
Plataforma: {customer.platform.value}.
App sugerido: {customer.app_name or 'não informado'}.
Telas: {customer.screen_count}.
Agradeça a preferência pela IPTV PREMIUM.
Use emojis.
"""


def _promo(customer: Customer) -> str:
    return f"""
Crie uma mensagem curta oferecendo uma renovação antecipada para {customer.name}.
Mencione que ele tem um desconto atual de {_brl(customer.discount)} e bônus: {customer.bonus or 'nenhum'}.
Use emojis.
"""


_BUILDERS = {
    MessageIntent.REMINDER: _reminder,
    MessageIntent.WELCOME: _welcome,
    MessageIntent.PROMO: _promo,
}


def build_prompt(customer: Customer, intent: MessageIntent) -> str:
    """Instruction text asking the model for a message of the given kind."""
    return _BUILDERS[MessageIntent(intent)](customer).strip()
