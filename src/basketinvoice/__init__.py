"""Parse shopping baskets, apply VAT and import surcharges, print invoices."""
