"""Configuration module for rulebot"""

# Responses
FALLBACK_RESPONSE = "I'm sorry, I don't understand that. Can you please rephrase?"
GREETING = "Hello! How can I help you today?"

# Dynamic time response (24-hour clock)
TIME_FORMAT = "%H:%M:%S"
TIME_RESPONSE_TEMPLATE = "The current time is {time}."

# CLI settings
APP_TITLE = "AI Chatbot"
USER_LABEL = "You"
BOT_LABEL = "Bot"
CLI_WIDTH = 62
TYPEWRITER_DELAY = 0.013  # seconds per character, 0 disables the effect
