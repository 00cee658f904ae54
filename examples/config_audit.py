"""
Audit a deployed YAML config against its baseline.

Volatile fields are ignored, extra keys in the deployed config are only
warnings, and the first real error is reported through the assertion sink.

Run this with:
    python examples/config_audit.py
"""

from treediff import (
    DiffPolicy,
    FailOn,
    TreeMismatchError,
    assert_trees_equal,
    build_report,
    first_discrepancy,
    parse_document,
)

BASELINE = """
service:
  name: billing
  replicas: 3
  ports: [80, 443]
  deployed_at: 2024-01-01T00:00:00Z
limits:
  cpu: 2
  memory: 4Gi
"""

DEPLOYED = """
service:
  name: billing
  replicas: 3
  ports: [80, 443, 8080]
  deployed_at: 2024-06-30T12:00:00Z
  debug: true
limits:
  cpu: 2.0
  memory: 2Gi
"""


def main() -> None:
    baseline = parse_document(BASELINE, fmt="yaml", source="baseline.yaml")
    deployed = parse_document(DEPLOYED, fmt="yaml", source="deployed.yaml")
    policy = DiffPolicy.default().with_ignored(["deployed_at"])

    report = build_report(baseline, deployed, policy)
    print(report.to_text())
    print(f"\nFails on errors only: {report.fails(FailOn.ERROR)}")

    first = first_discrepancy(baseline, deployed, policy)
    if first is not None:
        print(f"First difference at '{first.path}' ({first.kind.value})")

    try:
        assert_trees_equal(baseline, deployed, policy)
    except TreeMismatchError as exc:
        print(f"\nAssertion failed with {len(exc.discrepancies)} discrepancies")


if __name__ == "__main__":
    main()
