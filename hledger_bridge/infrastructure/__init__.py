"""Infrastructure adapters for the hledger executable."""
