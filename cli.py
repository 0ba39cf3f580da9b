# cli.py

"""
Entry point for running SeedScout from a source checkout.

Same commands as the installed ``seed-scout`` script:
- discover  : find product URLs for every (or filtered) vendor and update the store
- vendors   : list configured vendors
- config    : print the effective configuration

Example:
    python cli.py discover --vendor rareseeds
    python cli.py --config configs/default.yaml --log-level DEBUG discover
"""
from seed_scout.cli import cli


if __name__ == '__main__':
    cli()
