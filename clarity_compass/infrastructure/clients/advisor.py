"""Advice provider client - OpenAI-compatible chat completions returning structured JSON"""

import logging
from typing import Iterable, List, Mapping, Sequence, Type, TypeVar

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clarity_compass.config import settings
from clarity_compass.domain.exceptions import AdviceProviderError, InvalidAdviceResponseError
from clarity_compass.domain.models import (
    ConsortiumSummary,
    CostWeightSuggestion,
    Criterion,
    CriterionSuggestion,
    FinancingSummary,
    Option,
)
from clarity_compass.infrastructure.clients import prompts

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class AdviceOutput(BaseModel):
    advice: str = Field(..., min_length=1)


class CriterionSuggestionOutput(BaseModel):
    name: str = Field(..., min_length=1)
    weight: float
    rationale: str


class CriteriaOutput(BaseModel):
    suggestions: List[CriterionSuggestionOutput]


class CostWeightOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fixed_cost_weight: float = Field(..., alias="fixedCostWeight")
    variable_cost_weight: float = Field(..., alias="variableCostWeight")
    rationale: str


class CostWeightsOutput(BaseModel):
    suggestions: List[CostWeightOutput]


class AdviceClient:
    """Client for the hosted language model that writes advice and suggestions"""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        openai_client: AsyncOpenAI | None = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.advice_model
        self.base_url = base_url or settings.openai_base_url
        self.timeout = timeout or settings.advice_timeout_seconds
        self.temperature = settings.advice_temperature
        self.language = settings.advice_language
        self.max_retries = settings.advice_max_retries
        self._openai_client = openai_client

    async def get_yes_no_advice(self, context: str) -> str:
        system_prompt, user_prompt = prompts.yes_no_prompt(context, self.language)
        output = await self._ask(system_prompt, user_prompt, AdviceOutput)
        return output.advice

    async def get_multiple_choice_advice(
        self,
        context: str,
        options: Iterable[Mapping[str, str | None]],
    ) -> str:
        system_prompt, user_prompt = prompts.multiple_choice_prompt(context, options, self.language)
        output = await self._ask(system_prompt, user_prompt, AdviceOutput)
        return output.advice

    async def suggest_financial_weights(
        self,
        context: str,
        fixed_cost: float | None = None,
        variable_cost: float | None = None,
    ) -> List[CostWeightSuggestion]:
        system_prompt, user_prompt = prompts.financial_weights_prompt(
            context, fixed_cost, variable_cost, self.language
        )
        output = await self._ask(system_prompt, user_prompt, CostWeightsOutput)
        return [
            CostWeightSuggestion(
                fixed_cost_weight=s.fixed_cost_weight,
                variable_cost_weight=s.variable_cost_weight,
                rationale=s.rationale,
            )
            for s in output.suggestions
        ]

    async def get_financial_spending_advice(
        self,
        context: str,
        financing: FinancingSummary,
        consortium: ConsortiumSummary,
    ) -> str:
        """
        Compare financing against consortium.

        Both summaries already carry monthly_payment and total_cost, so the
        provider reasons over computed figures instead of doing the math itself.
        """
        system_prompt, user_prompt = prompts.financial_spending_prompt(
            context, financing, consortium, self.language
        )
        output = await self._ask(system_prompt, user_prompt, AdviceOutput)
        return output.advice

    async def suggest_weighted_criteria(
        self,
        context: str | None,
        criteria: Sequence[Criterion] = (),
        options: Sequence[Option] = (),
    ) -> List[CriterionSuggestion]:
        system_prompt, user_prompt = prompts.weighted_criteria_prompt(
            context, criteria, options, self.language
        )
        output = await self._ask(system_prompt, user_prompt, CriteriaOutput)
        return [
            CriterionSuggestion(name=s.name, weight=s.weight, rationale=s.rationale)
            for s in output.suggestions
        ]

    async def _ask(self, system_prompt: str, user_prompt: str, output_model: Type[OutputT]) -> OutputT:
        """
        Send one prompt and validate the JSON answer against output_model.

        Raises:
            AdviceProviderError: On missing API key, timeout, HTTP or network errors
            InvalidAdviceResponseError: On empty, non-JSON or schema-violating answers
        """
        raw_response = await self._complete(system_prompt, user_prompt)
        try:
            return output_model.model_validate_json(raw_response)
        except ValidationError as e:
            logger.warning(f"Advice provider answer rejected: {raw_response[:200]}")
            raise InvalidAdviceResponseError(f"Invalid answer from advice provider: {e.error_count()} errors") from e

    async def _complete(self, system_prompt: str, user_prompt: str) -> str:
        if self._openai_client is not None:
            return await self._create_completion(self._openai_client, system_prompt, user_prompt)

        if not self.api_key:
            raise AdviceProviderError("Advice provider API key is not configured")

        async with httpx.AsyncClient(timeout=self.timeout) as http_client:
            client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=self.max_retries,
                http_client=http_client,
            )
            return await self._create_completion(client, system_prompt, user_prompt)

    async def _create_completion(self, client: AsyncOpenAI, system_prompt: str, user_prompt: str) -> str:
        try:
            logger.debug(f"Calling advice provider with model: {self.model}")
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except openai.APITimeoutError as e:
            raise AdviceProviderError(f"Advice provider timeout after {self.timeout}s") from e
        except openai.APIStatusError as e:
            raise AdviceProviderError(f"Advice provider error: {e.status_code}") from e
        except openai.APIConnectionError as e:
            raise AdviceProviderError(f"Advice provider unreachable: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise InvalidAdviceResponseError("Advice provider returned an empty answer")

        return response.choices[0].message.content
