"""Prompt templates for answer generation."""
from __future__ import annotations

from typing import List

from ragngine.clients.llm import LLMMessage

DOCUMENT_SYSTEM_PROMPT = (
    "You are an assistant responding to a user query with information from their own document set.\n"
    "Use the most relevant documents below and craft a clear, concise and accurate response by "
    "synthesizing their content. Tailor the response to the specific context of the user's question, "
    "providing detailed, actionable information drawn directly from the provided data.\n\n"
    "<context>\n{context}\n</context>"
)

CONTEXT_SEPARATOR = "\n\n"


def build_messages(question: str, context: str) -> List[LLMMessage]:
    return [
        {"role": "system", "content": DOCUMENT_SYSTEM_PROMPT.format(context=context)},
        {"role": "user", "content": question},
    ]
