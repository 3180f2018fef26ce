"""Qt UI constants and narration strings used across widgets."""

WINDOW_TITLE: str = "World Trivia TV"

COUNTRIES: tuple[str, ...] = ("USA", "Nigeria")
ANY_TIME_LABEL: str = "Any Time"
ANY_PERIOD_PARAM: str = "any"
PERIODS: tuple[str, ...] = ("1940-1959", "1960-1979", "1980-1999", "2000-2019", ANY_TIME_LABEL)

MIN_QUESTION_COUNT: int = 5
MAX_QUESTION_COUNT: int = 15
DEFAULT_QUESTION_COUNT: int = 10

SELECTION_TITLE: str = "World Trivia TV"
SELECTION_SUBTITLE: str = "Choose your preferences to begin"
COUNTRY_HEADING: str = "Choose Country"
PERIOD_HEADING: str = "Choose Time Period"
COUNT_HEADING: str = "How Many Questions? (5-15)"
START_BUTTON: str = "Start Trivia"
REPEAT_INSTRUCTIONS_BUTTON: str = "Repeat Instructions"
HIGH_CONTRAST_BUTTON: str = "High Contrast"
NORMAL_CONTRAST_BUTTON: str = "Normal Contrast"
LARGE_TEXT_BUTTON: str = "Larger Text"
NORMAL_TEXT_BUTTON: str = "Normal Text"
SETTINGS_BUTTON: str = "Settings"
ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"

EXIT_ROUND_BUTTON: str = "Exit Round"
BACK_TO_MENU_BUTTON: str = "Back to Menu"
PAUSE_BUTTON: str = "Pause"
RESUME_BUTTON: str = "Resume"
REPEAT_BUTTON: str = "Repeat"
NEXT_BUTTON: str = "Next"
REPLAY_BUTTON: str = "Replay"

LOADING_MESSAGE: str = "Loading your trivia..."
PAUSED_TITLE: str = "Paused"
PAUSED_HINT: str = "Press Resume to continue"
FINISHED_TITLE: str = "Trivia Complete!"
FINISHED_SUMMARY_TEMPLATE: str = "You've finished all {count} questions for {country}."
PROGRESS_TEMPLATE: str = "Question {number} of {total}"
QUESTION_COUNTDOWN_TEMPLATE: str = "Answer in: {seconds} {unit}"
ANSWER_COUNTDOWN_TEMPLATE: str = "Next question in {seconds} {unit}..."

NOT_FOUND_MESSAGE: str = (
    "No trivia found for this selection. Please go back and try another combination."
)
LOAD_FAILED_MESSAGE: str = "Failed to load trivia. Please check your connection and try again."
DATA_UNAVAILABLE_TITLE: str = "Trivia Unavailable"
DATA_UNAVAILABLE_MESSAGE: str = (
    "The trivia collection could not be loaded, so every selection will come back empty. "
    "Check the log for details."
)

WELCOME_NARRATION: str = (
    "Welcome to World Trivia TV. Choose a country, a time period, and how many questions "
    "you want to answer, then press Start."
)
INSTRUCTIONS_NARRATION: str = (
    "Welcome to World Trivia TV. Choose a country: {countries}. Then choose a time period. "
    "Select how many questions you want, from {minimum} to {maximum}. "
    "Finally, press the Start Trivia button."
)
COUNT_NARRATION_TEMPLATE: str = "{count} questions"
INTRO_NARRATION_TEMPLATE: str = (
    "Starting trivia for {country} with {count} questions. Get ready for your first question."
)
ANSWER_NARRATION_TEMPLATE: str = "The answer is: {answer}."
LOAD_FAILED_NARRATION: str = "Failed to load trivia. Please go back to the menu and try again."
FINISHED_NARRATION: str = (
    "Trivia has finished. You can replay from the beginning or go back to the menu."
)
LAST_QUESTION_NARRATION: str = "That was the last question. Trivia has finished."
PAUSED_NARRATION: str = "Paused"
RESUMED_NARRATION: str = "Resuming trivia"
REPLAY_NARRATION: str = "Restarting trivia from the beginning."
