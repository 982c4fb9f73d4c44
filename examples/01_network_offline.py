"""Example 1: Offline Network Diagram

Builds the data-flow network from in-memory worksheets instead of a
published spreadsheet and writes network.html.

For demonstration purposes, this uses a small hand-written inventory.
In production, Fetcher.fetch_network_tables reads the two worksheets.
"""

from pathlib import Path

import pandas as pd

from sightline.charts.report import write_network_report
from sightline.pipeline.processor import Processor


def main():
    systems = pd.DataFrame({
        "System": ["CRM", "Billing", "Warehouse", "Reporting", "Archive"],
        "Data Type": ["Customer", "Financial", "Inventory", "Analytics", "Analytics"],
        "Owner": ["Sales", "Finance", "Operations", "Finance", "IT"],
    })
    flows = pd.DataFrame({
        "From": ["CRM", "CRM", "Billing", "Warehouse", "Billing"],
        "To": ["Billing", "Reporting", "Reporting", "Reporting", "Reporting"],
    })

    result = Processor().process_network(systems, flows)

    print("Systems drawn:")
    print(result.nodes[["id", "data_type", "owner", "degree", "size"]].to_string(index=False))
    print(f"\nNot drawn (no flows): {', '.join(result.orphans) or 'none'}")

    paths = write_network_report(result, Path("output/example"), seed=42)
    print(f"\nWrote {paths[0]}")


if __name__ == "__main__":
    main()
