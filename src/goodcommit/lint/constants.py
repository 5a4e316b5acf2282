"""Constants for commit message linting."""

import re
import string

SUBJECT_MAX_LENGTH = 50
BODY_MAX_LENGTH = 72

DEFAULT_COMMENT_CHAR = "#"

# Written by `git commit --verbose`; everything below it is the diff
SCISSORS_MARKER = "------------------------ >8 ------------------------"

# Verbs whose past, third-person and gerund forms betray a non-imperative subject
IMPERATIVE_MOOD_BLACKLIST = (
	"added",
	"adds",
	"adding",
	"avoided",
	"avoids",
	"avoiding",
	"amended",
	"amends",
	"amending",
	"bumped",
	"bumps",
	"bumping",
	"changed",
	"changes",
	"changing",
	"checked",
	"checks",
	"checking",
	"committed",
	"commits",
	"committing",
	"copied",
	"copies",
	"copying",
	"corrected",
	"corrects",
	"correcting",
	"created",
	"creates",
	"creating",
	"deleted",
	"deletes",
	"deleting",
	"fixed",
	"fixes",
	"fixing",
	"implemented",
	"implements",
	"implementing",
	"improved",
	"improves",
	"improving",
	"introduced",
	"introduces",
	"introducing",
	"moved",
	"moves",
	"moving",
	"pruned",
	"prunes",
	"pruning",
	"refactored",
	"refactors",
	"refactoring",
	"removed",
	"removes",
	"removing",
	"renamed",
	"renames",
	"renaming",
	"replaced",
	"replaces",
	"replacing",
	"resolved",
	"resolves",
	"resolving",
	"showed",
	"shows",
	"showing",
	"tested",
	"tests",
	"testing",
	"updated",
	"updates",
	"updating",
	"used",
	"uses",
	"using",
)

IMPERATIVE_MOOD_PATTERN = re.compile("|".join(map(re.escape, IMPERATIVE_MOOD_BLACKLIST)), re.IGNORECASE)

CAPITALIZED_SUBJECT_PATTERN = re.compile(rf"^[ \t]*([A-Z][a-z]*|[0-9]+)([ \t]|[{re.escape(string.punctuation)}]|$)")

LEADING_WHITESPACE_PATTERN = re.compile(r"^[ \t]+")

URL_PATTERN = re.compile(r"[ \t]*(https?|ftp|file)://\S+")

# User-facing warning texts, keyed by rule number
MSG_SEPARATE_SUBJECT = "Separate subject from body with a blank line"
MSG_SUBJECT_LENGTH = "Limit the subject line to {limit} characters ({length} chars)"
MSG_CAPITALIZE = "Capitalize the subject line"
MSG_TRAILING_PERIOD = "Do not end the subject line with a period"
MSG_IMPERATIVE_MOOD = "Use the imperative mood in the subject line, e.g 'fix' not 'fixes'"
MSG_BODY_LENGTH = "Wrap the body at {limit} characters ({length} chars)"
MSG_SINGLE_WORD = "Do no write single worded commits"
MSG_LEADING_WHITESPACE = "Do not start the subject line with whitespace"
