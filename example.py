#!/usr/bin/env python3
"""
Example usage of the JSON Tabulator.

This script flattens a nested JSON document into a TSV table, edits a cell
through a workspace, transposes the table and rebuilds the JSON.
"""

import json
from json_tabulator import JSONTableConverter, Workspace


def main():
    """Main example function."""
    print("JSON Tabulator Example")
    print("=" * 50)

    sample_data = [
        {
            "id": 1,
            "name": "Alice Johnson",
            "profile": {"age": 30, "city": "New York"},
            "interests": ["reading", "hiking"]
        },
        {
            "id": 2,
            "name": "Bob Smith",
            "profile": {"age": 25, "city": "San Francisco"},
            "interests": ["coding"]
        }
    ]

    json_string = json.dumps(sample_data, indent=2)
    converter = JSONTableConverter()

    # JSON -> TSV
    result = converter.json_to_tsv(json_string)
    if not result.success:
        print(f"Failed: {result.errors}")
        return

    print(f"Table: {result.row_count} rows x {result.column_count} columns\n")
    print(result.output)

    # TSV -> JSON
    back = converter.tsv_to_json(result.output)
    print("\nRebuilt from TSV:")
    print(back.output)

    # Editing session
    workspace = Workspace()
    workspace.load_document_text(json_string)
    workspace.edit_cell(0, "profile.city", "Boston")
    print("\nAfter editing Alice's city:")
    print(workspace.document_text)

    workspace.transpose()
    print("\nTransposed table:")
    print(workspace.copy_table())


if __name__ == "__main__":
    main()
