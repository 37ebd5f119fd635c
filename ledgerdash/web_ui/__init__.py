"""NiceGUI rendering shell for the ledger dashboard."""
