"""Initializes the prompts module and aggregates prompts from all submodules."""

from .oracle import get_prompts as get_oracle_prompts


def get_all_prompts() -> dict[str, str]:
    """
    Returns a dictionary of all available prompts from all prompt files.
    """
    prompts = {}
    prompts.update(get_oracle_prompts())
    return prompts
