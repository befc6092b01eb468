#!/usr/bin/env python3
"""
Complete Playground Demo: VibeScript → Pseudocode → Simulated Output

Shows the full workflow:
1. Load each built-in example in rotation
2. Transpile it to Python-like pseudocode
3. Simulate its output
4. Render the output as HTML
5. Run a deferred completion through the scheduler
"""

import asyncio

from vibescript.backends import render_html, render_text
from vibescript.scheduler import RunScheduler
from vibescript.session import PlaygroundSession


def main():
    session = PlaygroundSession()

    print("=" * 80)
    print("PLAYGROUND DEMO: VibeScript → Pseudocode → Output")
    print("=" * 80)

    # =========================================================================
    # STEPS 1-4: Every example
    # =========================================================================
    for n in range(len(session.config.examples)):
        source = session.load_next_example()
        result = session.run(source)

        print(f"\nEXAMPLE {n + 1}")
        print("-" * 80)
        for line in source.split("\n"):
            print(f"   {line}")

        print("\n   Transpiled:")
        for line in result.transpiled_text.split("\n"):
            print(f"   {line}")

        print("\n   Output:")
        for line in render_text(result.simulation).split("\n"):
            print(f"   {line}")

        print(f"\n   HTML: {render_html(result.simulation)}")

    # =========================================================================
    # STEP 5: Deferred run
    # =========================================================================
    print("\n" + "=" * 80)
    print("DEFERRED RUN")

    async def deferred():
        scheduler = RunScheduler(session)
        scheduler.schedule(session.load_next_example())
        print(f"   While running: {scheduler.display.markup}")
        await scheduler.wait_idle()
        print(f"   After delay:   {scheduler.display.markup}")
        print(f"   States: {[s.value for s in scheduler.control.history]}")

    asyncio.run(deferred())
    print("=" * 80)


if __name__ == "__main__":
    main()
