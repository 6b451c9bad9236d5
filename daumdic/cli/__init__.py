"""Command line interface for daumdic."""
