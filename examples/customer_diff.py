"""
Compare two customer records and print every difference.

Run this with:
    python examples/customer_diff.py
"""

from treediff import build_report, compare, parse_document

EXPECTED_JSON = """
{
  "id": 1,
  "name": "John",
  "details": {
    "city": "London",
    "phones": ["123", "456"],
    "address": {"line1": "10 Downing", "zip": "SW1"}
  }
}
"""

ACTUAL_JSON = """
{
  "id": 1,
  "name": "Johnny",
  "details": {
    "city": "Paris",
    "phones": ["123"],
    "address": {"line1": "11 Downing", "zip": "SW1", "country": "UK"}
  },
  "extraField": "ignored"
}
"""


def main() -> None:
    expected = parse_document(EXPECTED_JSON)
    actual = parse_document(ACTUAL_JSON)

    # Raw records, straight from the lazy sequence
    for d in compare(expected, actual):
        print(f"{d.kind.value:<15} {str(d.path):<25} {d.severity.value}")

    # Rendered report
    print()
    print(build_report(expected, actual).to_text())


if __name__ == "__main__":
    main()
