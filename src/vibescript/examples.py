"""
Built-in example programs for the playground's "load example" action.

Three programs that between them touch every statement kind:
greeting + conditional, a counting loop, and yeah/nah booleans.
"""
from typing import Tuple


GREETING_EXAMPLE = """braincell name = "VIBE"
skibidi spill "Welcome to " + name + "! 💙"

braincell vibes = 100
sus check vibes > 50
    spill "The vibes are immaculate! ✨"
plot twist
    spill "Need more vibes..."
end sus"""

LOOP_EXAMPLE = """braincell count = 0
vibe until count >= 3
    spill "Vibing... " + str(count)
    sum count 1
end vibe
spill "Loop complete! 🎵\""""

BOOLEAN_EXAMPLE = """braincell is_cool = yeah
braincell is_boring = nah

sus check is_cool
    skibidi spill "This language is fire! 🔥"
end sus"""


def builtin_examples() -> Tuple[str, ...]:
    return (GREETING_EXAMPLE, LOOP_EXAMPLE, BOOLEAN_EXAMPLE)
