import json
import sys
from chefai.core.logging_config import setup_logging
from chefai.services.rule_catalog import load_rule_catalog


def main():
    """Write the rule catalog, as sent to the LLM, to a JSON file (default: stdout)."""
    setup_logging()
    output_path = sys.argv[1] if len(sys.argv) > 1 else None

    catalog = load_rule_catalog()
    context = catalog.to_context()

    if output_path:
        with open(output_path, "w") as handle:
            json.dump(context, handle, indent=2)
        print(f"Exported {len(context['rules'])} rules to {output_path}.")
    else:
        json.dump(context, sys.stdout, indent=2)


if __name__ == "__main__":
    main()
