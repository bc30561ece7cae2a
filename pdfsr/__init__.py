"""pdfsr — spaced repetition for PDF flashcards, scheduled by filename."""

__version__ = "0.1.0"

from pdfsr.models import Flashcard, Outcome, Policy, ReviewResult
from pdfsr.app import App

__all__ = ["App", "Flashcard", "Outcome", "Policy", "ReviewResult"]
