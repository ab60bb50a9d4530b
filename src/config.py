"""
Configuration for the KNS College bot.

Everything here is static: weights for the matcher, phrase lists for the
programme-intent detector, fallback phrases and composer templates.
A few presentation settings can be overridden from the environment.
"""

import os


def env_float(name, default):
    """Float from the environment; unset or unparsable values give the default"""
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


# =============================================================================
# LOGGING / ENVIRONMENT
# =============================================================================

LOG_LEVEL = os.getenv("KNS_BOT_LOG_LEVEL", "WARNING").strip().upper()

# Empty string disables transcript logging
TRANSCRIPT_PATH = os.getenv("KNS_BOT_TRANSCRIPT_PATH", "").strip()


# =============================================================================
# NORMALIZATION
# =============================================================================

# Removed as whole words before FAQ scoring
STOP_WORDS = [
    "what", "where", "when", "who", "why", "how",
    "is", "are", "do", "does", "can", "could", "will", "would", "should",
    "tell", "give", "show", "explain",
    "i", "me", "my", "you", "your", "we", "our",
    "the", "a", "an", "to", "for", "of", "in", "on", "at", "with", "about",
]


# =============================================================================
# FAQ MATCHER
# =============================================================================

MATCHER_CONFIG = {
    "exact_keyword_score": 10,     # keyword hit on a word boundary
    "partial_keyword_score": 5,    # keyword hit inside another word
    "keyword_part_score": 2,       # each long part of a multi-word keyword
    "multi_keyword_factor": 2,     # bonus per matched keyword when > 1 matched
    "question_word_score": 3,      # each long word of the question label
    "min_part_length": 3,          # parts/words must be longer than this
    "min_partial_score": 5,        # best partial score accepted without exact hit
}

# Last resort when nothing scores high enough: phrase -> FaqEntry.question
FALLBACK_PHRASES = {
    "hello": "Greeting",
    "hi": "Greeting",
    "hey": "Greeting",
    "thanks": "Thank you",
    "thank you": "Thank you",
    "bye": "Goodbye",
    "goodbye": "Goodbye",
    "okay": "Acknowledgment",
    "ok": "Acknowledgment",
    "alright": "Acknowledgment",
    "sure": "Acknowledgment",
    "got it": "Acknowledgment",
    "understood": "Acknowledgment",
    "fine": "Acknowledgment",
    "yes": "Acknowledgment",
    "yeah": "Acknowledgment",
    "yep": "Acknowledgment",
    "yup": "Acknowledgment",
}


# =============================================================================
# PROGRAMMES: INTENT DETECTOR AND RESOLVER
# =============================================================================

# "Do you offer X?" style questions
AVAILABILITY_PATTERNS = [
    r"do you (offer|have|provide|teach).*?(course|programme|diploma|certificate)",
    r"is.*?(available|offered|taught)",
    r"can i (study|learn|take|enroll).*",
    r".*?(course|programme|diploma|certificate).*?(available|offer|have)",
    r".*?(available|offer|have).*?(course|programme|diploma|certificate)",
    r"tell me about.*?(course|programme|diploma|certificate)",
    r"what.*?(course|programme|diploma|certificate).*?(do you|offer|have)",
]

# Stripped from the message to get the programme the visitor is asking about
QUERY_STRIP_WORDS = [
    "do", "you", "offer", "have", "provide", "teach", "is", "are", "can", "i",
    "study", "learn", "take", "enroll", "available", "offered", "taught",
    "course", "programme", "diploma", "certificate", "in", "for", "about",
    "the", "a", "an", "tell", "me", "what", "which",
]

RESOLVER_CONFIG = {
    "name_prefix_length": 15,      # long names also match on their first N chars
    "min_query_length": 3,         # shorter residuals fall back to the raw message
}


# =============================================================================
# RESPONSES
# =============================================================================

CONTACT = {
    "phone": "+232 79 422 442",
    "admissions_email": "admission@kns.edu.sl",
    "training_email": "training@kns.edu.sl",
    "website": "www.kns.sl",
}

# Category -> keywords of a matched FAQ entry that make its tip eligible.
# Checked in this order, first hit wins.
TIP_CATEGORIES = {
    "admissions": ["admission", "apply", "enroll"],
    "programme": ["programme", "course", "diploma", "certificate"],
    "fees": ["fee", "cost", "price"],
}

TIP_TEMPLATES = {
    "admissions": (
        "💡 Tip: You can also visit our Admissions page or contact us directly at "
        "{phone} for personalized assistance with your application."
    ),
    "programme": (
        "💡 Tip: Visit our programmes page to see detailed information about all "
        "available programmes, including duration, certifications, and learning modes."
    ),
    "fees": (
        "💡 Tip: For detailed fee information for your specific programme, please "
        "contact our admissions office at {admissions_email} or {phone}."
    ),
}

HELP_TOPICS = [
    "Admissions and how to apply",
    "Available programmes and courses",
    "Fees and payment options",
    "Online learning options",
    "Certifications included",
    "Contact information and location",
]

QUICK_QUESTIONS = [
    "How do I apply?",
    "What programmes do you offer?",
    "What are the fees?",
    "Do you offer online learning?",
    "What certifications are included?",
    "Where are you located?",
]


# =============================================================================
# SESSION / INTERACTIVE MODE
# =============================================================================

BOT_CONFIG = {
    "welcome_message": (
        "Hello! I'm here to help answer your questions about KNS College. "
        "What would you like to know?"
    ),
    # Seconds; 0 disables the simulated typing pause in the terminal chat
    "typing_delay": env_float("KNS_BOT_TYPING_DELAY", 0.5),
    "followup_delay": 0.8,
    "tip_delay": 1.0,
}
