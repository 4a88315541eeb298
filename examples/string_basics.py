"""
String basics: creating and manipulating HybridStrings.

Walks through construction, the inline/overflow split, iteration,
ordering and the word-level helpers.
"""

import numpy as np

from hybridtext import INLINE_CAPACITY, HybridString

print("=" * 60)
print("HYBRIDSTRING BASICS")
print("=" * 60)

# ============================================================================
# 1. Creating Strings
# ============================================================================

print("\n1. CREATING STRINGS")
print("-" * 60)

short = HybridString("hello")
print(f"From text:          {short!r}  len={len(short)}")

dashes = HybridString.repeated(25, "-")
print(f"Repeated:           {dashes}  len={len(dashes)}")

empty = HybridString.empty()
print(f"Empty:              {empty!r}  is_empty={empty.is_empty()}")

# ============================================================================
# 2. Inline vs Overflow
# ============================================================================

print("\n\n2. INLINE VS OVERFLOW")
print("-" * 60)

s = HybridString()
for ch in b"abcdefghijklmnopqrstuvwxy":
    s.append(ch)
    if len(s) in (INLINE_CAPACITY, INLINE_CAPACITY + 1):
        print(f"  size={len(s):>2}  overflow={s.overflow_size}  capacity={s.capacity}")
print(f"Byte 19 (inline):   {chr(s.at(19))}")
print(f"Byte 20 (overflow): {chr(s.at(20))}")

# ============================================================================
# 3. Iteration
# ============================================================================

print("\n\n3. ITERATION")
print("-" * 60)

word = HybridString("Iterator")
print(f"Forward:            {bytes(word.cbegin()).decode()}")
print(f"Reverse:            {bytes(reversed(word)).decode()}")
it = word.begin() + 4
print(f"begin() + 4:        {chr(it.get())}  distance to end={word.end() - it}")

# ============================================================================
# 4. Ordering
# ============================================================================

print("\n\n4. ORDERING")
print("-" * 60)

names = [HybridString(n) for n in ("pear", "apple", "ap", "b")]
print(f"Sorted:             {[str(n) for n in sorted(names)]}")

# ============================================================================
# 5. Text Processing
# ============================================================================

print("\n\n5. TEXT PROCESSING")
print("-" * 60)

text = HybridString("   The cat sat on the MAT. The cat ran.   ")
print(f"Trimmed:            '{text.copy().trim()}'")
print(f"Lowercased:         '{text.copy().trim().to_lower()}'")
print(f"Unique words:       {[str(w) for w in text.unique_words()]}")
print(f"Frequency:          {{{', '.join(f'{w}: {c}' for w, c in text.word_frequency().items())}}}")
print(f"Joined:             '{HybridString(', ').join(['a', 'b', 'c'])}'")
print(f"starts_with('ab'):  {HybridString('a').starts_with('ab')}")

rng = np.random.default_rng(0)
print(f"Random words:       {[str(HybridString.generate_random_word(5, rng)) for _ in range(3)]}")

print("\n" + "=" * 60)
print("STRING EXAMPLES COMPLETE")
print("=" * 60)
