"""Static metadata describing World Trivia TV."""

APP_NAME = "World Trivia TV"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "World Trivia TV is a lean-back trivia presenter built with Qt and FastAPI. "
    "Pick a country, a time period and a number of questions, then sit back while "
    "each question is read aloud and its answer is revealed automatically."
)

HELP_TEXT = (
    "Choose a country and a time period, set how many questions you want (5 to 15) "
    "and press Start Trivia.\n\n"
    "During a round each question is shown for a few seconds before the answer is "
    "revealed. Use Pause to stop the clock, Repeat to hear the current question again "
    "and Next to skip ahead. The retrieval API is also available to other clients at "
    "/api/trivia?country=USA&period=any."
)
