"""Pipeline nodes.

- encode: compress the captured image to base64 JPEG
- ocr: extract text through the OCR endpoint
- synthesize: generate flashcards through the generation endpoint
"""

from cards_core.graph.nodes import encode, ocr, synthesize

__all__ = ["encode", "ocr", "synthesize"]
