"""Read-check-repeat loop over a :class:`SpellChecker`."""

from rich.console import Console

from bloomcheck.spellcheck.checker import SpellChecker

WORD_PROMPT = "Please enter word to check: "
AGAIN_PROMPT = "Do you want to enter more words? y or n "
YES_ANSWERS = {"y", "yes"}


class InteractiveSession:
    def __init__(self, checker: SpellChecker, console: Console) -> None:
        self.checker = checker
        self.console = console

    def verdict(self, word: str) -> str:
        if self.checker.is_word_valid(word):
            return f"Given word {word} has correct spelling"
        return f"Given word {word} does not have correct spelling"

    def run(self) -> int:
        checked = 0
        try:
            while True:
                word = self.console.input(WORD_PROMPT)
                self.console.print(self.verdict(word), markup=False, highlight=False)
                checked += 1
                answer = self.console.input(AGAIN_PROMPT)
                if answer.strip().lower() not in YES_ANSWERS:
                    break
        except (EOFError, KeyboardInterrupt):
            self.console.print()
        return checked
