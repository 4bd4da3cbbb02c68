"""
Prompt view models bound by the external UI.
"""

from passerelle.presentation.prompts.base_prompt import BasePrompt
from passerelle.presentation.prompts.pairing_prompt import PairingPrompt
from passerelle.presentation.prompts.selection_prompt import SelectionPrompt

__all__ = ["BasePrompt", "PairingPrompt", "SelectionPrompt"]
