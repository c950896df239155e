"""Prompt templates for the advice provider, one pair (system, user) per decision type"""

from typing import Iterable, Mapping, Sequence
from clarity_compass.domain.models import ConsortiumSummary, Criterion, FinancingSummary, Option

JSON_RULES = """
Output ONLY a valid JSON object matching this schema, no markdown fences or extra text:
{schema}
Write every text field in {language}."""

ADVICE_SCHEMA = '{"advice": "string"}'

CRITERIA_SCHEMA = """{
  "suggestions": [
    {"name": "string", "weight": "number (0-100)", "rationale": "string"}
  ]
}"""

COST_WEIGHTS_SCHEMA = """{
  "suggestions": [
    {"fixedCostWeight": "number (0-1)", "variableCostWeight": "number (0-1)", "rationale": "string"}
  ]
}"""


def _system(role: str, schema: str, language: str) -> str:
    return role.strip() + "\n" + JSON_RULES.format(schema=schema, language=language)


def _money(value: float) -> str:
    return f"{value:,.2f}"


def yes_no_prompt(context: str, language: str) -> tuple[str, str]:
    system = _system(
        """
You are an assistant that gives helpful advice on Yes/No decisions.
Weigh the potential benefits, risks and alternatives, and focus on the user's
best interests and well-being. Keep the advice short and easy to understand:
a single paragraph.""",
        ADVICE_SCHEMA,
        language,
    )
    user = f"Should the user answer \"Yes\" or \"No\"?\n\nContext: {context}"
    return system, user


def multiple_choice_prompt(context: str, options: Iterable[Mapping[str, str | None]], language: str) -> tuple[str, str]:
    system = _system(
        """
You help users pick the best option among several alternatives.
Compare the options against the decision context and recommend one, explaining why.""",
        ADVICE_SCHEMA,
        language,
    )
    lines = []
    for opt in options:
        description = opt.get("description")
        lines.append(f"- {opt['value']}: {description}" if description else f"- {opt['value']}")
    user = f"Context: {context}\nOptions:\n" + "\n".join(lines)
    return system, user


def financial_weights_prompt(
    context: str,
    fixed_cost: float | None,
    variable_cost: float | None,
    language: str,
) -> tuple[str, str]:
    system = _system(
        """
You are an expert financial consultant. Suggest several different weightings of
fixed and variable costs so the user can understand different scenarios.
Give a short rationale for each suggestion. fixedCostWeight and
variableCostWeight must add up to 1 in every suggestion.""",
        COST_WEIGHTS_SCHEMA,
        language,
    )
    user = f"Context: {context}"
    if fixed_cost is not None:
        user += f"\nFixed cost: {_money(fixed_cost)}"
    if variable_cost is not None:
        user += f"\nVariable cost: {_money(variable_cost)}"
    return system, user


def financial_spending_prompt(
    context: str,
    financing: FinancingSummary,
    consortium: ConsortiumSummary,
    language: str,
) -> tuple[str, str]:
    system = _system(
        """
You are an expert financial consultant. Compare a financing plan with a
consortium (pooled-purchase plan) and give clear, concise advice formatted as
Markdown. Use lists and bold text for the key points. Consider total cost,
liquidity, time until the asset is acquired and any other relevant factor, then
recommend the option that looks more advantageous. Be direct.""",
        ADVICE_SCHEMA,
        language,
    )
    user = f"""Decision context: {context}

Option 1: Financing
- Asset value: {_money(financing.total_value)}
- Down payment: {_money(financing.down_payment)}
- Interest rate: {financing.interest_rate}% per month
- Installments: {financing.installments}
- Monthly payment: {_money(financing.monthly_payment)}
- Total cost: {_money(financing.total_cost)}

Option 2: Consortium
- Credit value: {_money(consortium.total_value)}
- Administrative fee: {consortium.admin_fee}%
- Installments: {consortium.installments}
- Monthly payment: {_money(consortium.monthly_payment)}
- Total cost: {_money(consortium.total_cost)}"""
    return system, user


def weighted_criteria_prompt(
    context: str | None,
    criteria: Sequence[Criterion],
    options: Sequence[Option],
    language: str,
) -> tuple[str, str]:
    system = _system(
        """
You help users set up a weighted decision matrix. Suggest relevant criteria
with a weight in percent and a short rationale for each. Do not repeat criteria
the user already has. Weights of existing and suggested criteria together
should add up to about 100.""",
        CRITERIA_SCHEMA,
        language,
    )
    parts = [f"Context: {context or 'not provided'}"]
    if criteria:
        parts.append("Existing criteria:\n" + "\n".join(f"- {c.name} ({c.weight}%)" for c in criteria))
    if options:
        parts.append("Options being compared:\n" + "\n".join(f"- {o.name}" for o in options))
    return system, "\n\n".join(parts)
