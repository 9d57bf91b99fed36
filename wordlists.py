# Word lists for the passphrase grammar
# Each category lives in its own file, one word per line, nothing but the
# line terminators for whitespace. Words are lower-case ASCII letters.
import enum
import logging
import os.path
import re
from collections.abc import Mapping

log = logging.getLogger(__name__)

MAXWORD = 70 # Longest word we'll accept in a word file
VALID_WORD = re.compile("[a-z]+")

class LexiconLoadError(Exception): pass
class LexiconExhausted(Exception): pass

class WordCategory(enum.Enum):
	# The value is the name of the word file.
	SingularCountNoun = "singular-count-nouns"
	PluralCountNoun = "plural-count-nouns"
	MassNoun = "mass-nouns"
	Adjective = "adjectives"
	IntransitiveVerb = "intransitives"
	TransitiveVerb = "transitives"
	TPSPIIntransitiveVerb = "tpspi-intransitives" # Third-person singular present indicative
	TPSPITransitiveVerb = "tpspi-transitives"
	PastIntransitiveVerb = "past-intransitives"
	PastTransitiveVerb = "past-transitives"
	Preposition = "prepositions"

class Lexicon(Mapping):
	"""Read-only mapping of WordCategory to a tuple of words

	Every category must have at least one word. Once built, the lexicon
	never changes, so it can be shared freely.
	"""
	def __init__(self, words):
		self._words = {}
		for cat in WordCategory:
			entries = tuple(words.get(cat, ()))
			if not entries: raise LexiconLoadError("no words in category %s" % cat.value)
			self._words[cat] = entries

	def __getitem__(self, cat): return self._words[cat]
	def __iter__(self): return iter(self._words)
	def __len__(self): return len(self._words)
	def __repr__(self):
		return "<Lexicon %s>" % ", ".join("%s=%d" % (cat.name, len(w)) for cat, w in self._words.items())

	def choice(self, cat, randbelow):
		"""Pick one word from the category, uniformly, with one draw"""
		return choose(self._words.get(cat, ()), cat, randbelow)

def choose(words, cat, randbelow):
	if not words: raise LexiconExhausted("no words left in category %s" % cat.value)
	return words[randbelow(len(words))]

def read_words(fn):
	"""Read one word file, preserving the order of the words in it"""
	words = []
	try:
		with open(fn, encoding="ascii") as f:
			for lineno, line in enumerate(f, 1):
				word = line.rstrip("\r\n")
				if not word: continue # Tolerate blank lines, esp a trailing one
				if len(word) > MAXWORD:
					raise LexiconLoadError("%s:%d: word longer than %d letters" % (fn, lineno, MAXWORD))
				if not VALID_WORD.fullmatch(word):
					raise LexiconLoadError("%s:%d: not a lower-case word: %r" % (fn, lineno, word))
				words.append(word)
	except OSError:
		raise LexiconLoadError("unable to open file %s" % fn)
	except UnicodeDecodeError:
		raise LexiconLoadError("%s: not an ASCII word file" % fn)
	return words

def load_lexicon(directory):
	words = { }
	for cat in WordCategory:
		fn = os.path.join(directory, cat.value)
		words[cat] = read_words(fn)
		log.debug("Loaded %d words from %s", len(words[cat]), fn)
	return Lexicon(words)
