"""Quickstart example for langpacks.

Loads the packs in examples/Assets, switches cultures and shows typed
lookups, fallbacks and change notification.

Run from anywhere: the relative "Assets" path is resolved next to this
script when it does not exist under the working directory.

Note: Examples enable DEBUG logging for langpacks so lookup misses are
visible. Production applications usually keep it at WARNING.
"""

import logging

import langpacks

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Initialize from a pack directory
print("=" * 50)
print("Example 1: Initialize")
print("=" * 50)

summary = langpacks.initialize("Assets", "en-us")
print(summary)
# Output: LoadSummary(total=2, ok=2, empty=0, unsupported=0, errors=0)

session = langpacks.get_current_session()
for pack in session.available_packs():
    print(f"{pack.culture_id}: {pack.culture_name} / {pack.english_name}")
# Output: en-us: English (United States) / English (United States)
# Output: id-id: Indonesia (Indonesia) / Indonesian (Indonesia)

# Example 2: String lookups
print("\n" + "=" * 50)
print("Example 2: String Lookups")
print("=" * 50)

print(langpacks.get_string("10", "Header", "Hello?"))
# Output: Hello

print(langpacks.localize("MainWindow,Title"))
# Output: Language pack demo

print(langpacks.get_string("10", "Missing", "<missing>"))
# Output: <missing>

# Example 3: Typed lookups
print("\n" + "=" * 50)
print("Example 3: Typed Lookups")
print("=" * 50)

print(session.translate("10", "Count", 0, int))
# Output: 42

print(session.translate("MainWindow", "ShowToolbar", False, bool))
# Output: True

print(session.translate("MainWindow", "Accent", 0, int))
# Output: 3368703

print(session.translate("10", "Header", -1, int))
# Output: -1

# Example 4: Switching cultures
print("\n" + "=" * 50)
print("Example 4: Switching Cultures")
print("=" * 50)

unsubscribe = session.add_observer(lambda kind: print(f"changed: {kind}"))

session.set_culture("id-ID")
# Output: changed: Culture
print(langpacks.localize("10,Header"))
# Output: Halo

session.set_culture("id_ID")
# (no output: culture already active)

session.set_culture("zz-ZZ")
# Output: changed: Culture
print(langpacks.localize("10,Header", "Hello (fallback)"))
# Output: Hello (fallback)

unsubscribe()

# Example 5: Lookup misses in the log
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

logging.getLogger("langpacks").setLevel(logging.DEBUG)
session.set_culture("en-us")
session.get_string("MainWindow", "Subtitle")
# Output: DEBUG langpacks.localization.pack: warning[ITEM_NOT_FOUND]: Item 'Subtitle' ...
