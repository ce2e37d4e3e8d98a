"""Quickstart example for zerointl.

This example demonstrates ICU message formatting: variables, plurals,
select, selectordinal and nesting, plus how malformed templates degrade.

Note: Formatting never raises for template content. Undefined values and
malformed spans render as they were written.
"""

from zerointl import format_icu, select_ordinal_category, validate_template

# Example 1: Variables
print("=" * 50)
print("Example 1: Variable Interpolation")
print("=" * 50)

print(format_icu("Hello, {name}!", {"name": "Alice"}))
# Output: Hello, Alice!

print(format_icu("Hello, {name}!"))
# Output: Hello, {name}!

# Example 2: Plurals (English)
print("\n" + "=" * 50)
print("Example 2: Plural Forms (English)")
print("=" * 50)

emails = "You have {count, plural, =0 {no emails} one {one email} other {# emails}}."
for count in (0, 1, 5):
    print(format_icu(emails, {"count": count}, "en"))
# Output:
# You have no emails.
# You have one email.
# You have 5 emails.

# Example 3: Plurals (Polish - one/few/many)
print("\n" + "=" * 50)
print("Example 3: Polish Plurals")
print("=" * 50)

files = "{count, plural, one {# plik} few {# pliki} many {# plików} other {# pliku}}"
for count in (1, 3, 5, 22):
    print(format_icu(files, {"count": count}, "pl"))
# Output:
# 1 plik
# 3 pliki
# 5 plików
# 22 pliki

# Example 4: Select
print("\n" + "=" * 50)
print("Example 4: Select (Gender)")
print("=" * 50)

arrival = "{gender, select, male {He} female {She} other {They}} will arrive soon"
for gender in ("male", "female", "unknown"):
    print(format_icu(arrival, {"gender": gender}))
# Output:
# He will arrive soon
# She will arrive soon
# They will arrive soon

# Example 5: Ordinals
print("\n" + "=" * 50)
print("Example 5: Ordinals")
print("=" * 50)

place = "{place, selectordinal, one {#st} two {#nd} few {#rd} other {#th}} place"
for n in (1, 2, 3, 4, 11, 21, 112):
    print(f"{n:>4} -> {select_ordinal_category(n, 'en'):<5} {format_icu(place, {'place': n})}")
# Output:
#    1 -> one   1st place
#    2 -> two   2nd place
#    3 -> few   3rd place
#    4 -> other 4th place
#   11 -> other 11th place
#   21 -> one   21st place
#  112 -> other 112th place

# Example 6: Nesting
print("\n" + "=" * 50)
print("Example 6: Nested Constructs")
print("=" * 50)

inbox = (
    "{count, plural, =0 {No items} "
    "other {{gender, select, male {He has} female {She has} other {They have}} # items}}"
)
print(format_icu(inbox, {"count": 3, "gender": "female"}))
# Output: She has 3 items

# Example 7: Malformed templates
print("\n" + "=" * 50)
print("Example 7: Malformed Templates")
print("=" * 50)

for template in ("{unterminated", "{count, number, other {x}}"):
    print(format_icu(template, {"count": 1}))
    print(validate_template(template).format())
# Output:
# {unterminated
# Errors (1):
#   [UNTERMINATED_PLACEABLE] at line 1, column 1: Unterminated placeable: missing '}'
# {count, number, other {x}}
# Errors (1):
#   [UNKNOWN_CONSTRUCT_TYPE] at line 1, column 1: Unknown construct type 'number'

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
