"""Sample dialogs and intents served by the default web bot."""

from .dialogs import DialogFactory, prompt_dialog, text_dialog

SAMPLE_INTENTS: dict[str, str] = {
    "greetings": "The user says hello.",
    "thanks": "The user thanks the bot.",
    "book_table": "The user wants to book a table at the restaurant.",
}

SAMPLE_PATTERNS: dict[str, list[str]] = {
    "greetings": [r"^(hello|hi|hey|bonjour|salut)\b"],
    "thanks": [r"\b(thanks|thank you|merci)\b"],
    "book_table": [r"\b(book|reserve)\b.*\btable\b", r"\breservation\b"],
}

SAMPLE_DIALOGS: dict[str, DialogFactory] = {
    "greetings": text_dialog("Hello! How can I help you?"),
    "thanks": text_dialog("You're welcome."),
    "book_table": prompt_dialog(
        name="book_table",
        questions={
            "number": "For how many people?",
            "time": "At what time?",
        },
        confirmation="Table booked for {number} at {time}.",
        complexity=1,
    ),
}
