# How well does the grammar match its own branch probabilities?
# Sample lots of phrases and sentences and count which way each choice went.
# Handy after tinkering with the grammar, or with a new randbelow function.
import sys
from collections import Counter
import clize # ImportError? pip install clize
from passphrase import PassphraseAssembler, WORDS_DIR, make_randbelow, parse_seed
from wordlists import LexiconLoadError, load_lexicon

class CountingAssembler(PassphraseAssembler):
	"""Assembler that counts its attempts"""
	def __init__(self, lexicon, randbelow):
		super().__init__(lexicon, randbelow)
		self.attempts = 0
	def compose(self):
		self.attempts += 1
		return super().compose()

def sentence_kind(text):
	return {".": "assertion", "?": "question", "!": "command"}[text[-1]]

def is_prefixed(text):
	# The separator after a prepositional phrase is the only interior : or ,
	return ":" in text or "," in text

def has_numeral(phrase):
	return phrase.split(" ", 1)[0].isdigit()

def analyze_counter(label, c, expected=None):
	total = c.total()
	print("%s (%d samples):" % (label, total))
	for which, count in c.most_common():
		line = "\t%s - %d (%5.2f%%)" % (which, count, count * 100 / total)
		if expected and which in expected: line += " expected %5.2f%%" % (expected[which] * 100)
		print(line)

def collect(assembler, samples):
	numerals = Counter(has_numeral(assembler.plural_noun_phrase()) for _ in range(samples))
	kinds, prefixed = Counter(), Counter()
	for _ in range(samples):
		# Single attempts, so the length filter doesn't skew anything
		text = assembler.compose()
		kinds[sentence_kind(text)] += 1
		prefixed[is_prefixed(text)] += 1
	assembler.attempts = 0
	for _ in range(samples): assembler.generate()
	return numerals, kinds, prefixed, assembler.attempts / samples

def main(*, samples=10000, seed="", words=WORDS_DIR):
	"""Compare observed grammar branch frequencies with the expected ones

	samples: How many of each thing to generate

	seed: Seed the random number generator (default: OS entropy)

	words: Directory holding the word files
	"""
	if samples < 1: raise clize.ArgumentError("Need at least one sample, not %d" % samples)
	randbelow = make_randbelow(parse_seed(seed))
	try: lexicon = load_lexicon(words)
	except LexiconLoadError as e: sys.exit("phrasestats: %s" % e)
	assembler = CountingAssembler(lexicon, randbelow)
	numerals, kinds, prefixed, attempts = collect(assembler, samples)
	analyze_counter("Numeral determiners in plural noun phrases", numerals, {True: 0.3, False: 0.7})
	analyze_counter("Sentence kinds", kinds, {"assertion": 1/2, "question": 1/3, "command": 1/6})
	analyze_counter("Prepositional prefix", prefixed, {True: 1/6, False: 5/6})
	print("Mean attempts per passphrase: %.3f" % attempts)

def cli(): clize.run(main)

if __name__ == "__main__": cli()
