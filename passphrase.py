# Generate memorable passphrases from a little English grammar
# Each passphrase is a sentence (an assertion, a question, or a command),
# sometimes with a prepositional phrase in front, eg:
#   Under my window, the fox chased 47 angry geese.
#   Should their aunt borrow some ink?
import importlib.resources
import logging
import os.path
import random
import re
import sys
import clize # ImportError? pip install clize
from grammar import SentenceBuilder
from wordlists import LexiconLoadError, load_lexicon

log = logging.getLogger(__name__)

MIN_LENGTH = 18 # Anything shorter gets thrown away and rerolled
# Bundled word lists ship as package data
WORDS_DIR = os.path.expanduser(os.environ.get("PASSPHRASE_WORDS",
	str(importlib.resources.files("passphrase_words"))))

def make_randbelow(seed=None):
	"""Return a randbelow(n) function, seeded once and never again

	With no seed, draws straight from the OS entropy pool. A seed gives a
	private generator, for reproducible runs.
	"""
	if seed is None: return random.SystemRandom().randrange
	return random.Random(seed).randrange

def capitalize(text):
	# ASCII only. A leading numeral stays as it is.
	if text[:1] and "a" <= text[0] <= "z": return text[0].upper() + text[1:]
	return text

class PassphraseAssembler(SentenceBuilder):
	def base_sentence(self):
		kind = self.randbelow(6)
		if kind < 3: return self.assertion()
		if kind < 5: return self.question()
		return self.command()

	def compose(self):
		"""Make one attempt at a passphrase, regardless of length"""
		if self.chance(6):
			pp = self.prepositional_phrase()
			base = self.base_sentence()
			sep = ":" if self.randbelow(2) else ","
			text = "%s%s %s" % (pp, sep, base)
		else:
			text = self.base_sentence()
		return capitalize(text)

	def generate(self, min_length=MIN_LENGTH):
		"""Keep composing until one is long enough. There's no limit on attempts."""
		discarded = 0
		while True:
			text = self.compose()
			if len(text) >= min_length: break
			discarded += 1
		if discarded: log.debug("Discarded %d short attempt(s)", discarded)
		return text

def parse_count(count):
	# Like strtol: take any leading integer, and anything not positive means 1
	m = re.match(r"\s*[+-]?[0-9]+", count)
	if not m: return 1
	return max(int(m.group()), 1)

def parse_seed(seed):
	if seed == "": return None
	try: return int(seed)
	except ValueError:
		raise clize.ArgumentError("Seed must be an integer, not %r" % seed)

def main(count="1", *, words=WORDS_DIR, seed="", verbose=False):
	"""Generate random, memorable passphrases

	count: How many passphrases to generate (default 1)

	words: Directory holding the word files. Defaults to $PASSPHRASE_WORDS,
	or the word lists that come with this script.

	seed: Seed the random number generator, for repeatable output. If
	omitted, the OS entropy pool is used.

	verbose: Show debug logging
	"""
	logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
	randbelow = make_randbelow(parse_seed(seed))
	try: lexicon = load_lexicon(words)
	except LexiconLoadError as e: sys.exit("passphrase-maker: %s" % e)
	assembler = PassphraseAssembler(lexicon, randbelow)
	for _ in range(parse_count(count)):
		print(assembler.generate())

def cli(): clize.run(main)

if __name__ == "__main__": cli()
