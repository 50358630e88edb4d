"""Plugging a supplemental detector into `detect()`.

Any async callable taking the text works. Here a canned "model reply" stands
in for a generative-model client; the reply is prose around a JSON array,
which the engine parses, validates and locates in the text.

Run:
    python examples/supplemental_example.py
"""

from __future__ import annotations
import asyncio
from pii_lens import detect, render, summarize

TEXT = "Ship to Meera Iyer, flat 4B. Her friend Meera Iyer will sign."

async def canned_model(text: str) -> str:
    return (
        "Here is what I found:\n"
        "```json\n"
        '[{"type": "Name", "value": "Meera Iyer"}, {"type": "PAN", "value": "ABCDE1234F"}]\n'
        "```"
    )

async def main() -> None:
    matches = await detect(TEXT, supplemental=canned_model)
    for m in matches:
        print(f"{m.category.value:<12} [{m.start}, {m.end}) {m.raw_value!r} -> {m.masked_value!r} ({m.source})")
    print(render(TEXT, matches, masked=True))
    for s in summarize(matches):
        print(s)

if __name__ == "__main__":
    asyncio.run(main())
