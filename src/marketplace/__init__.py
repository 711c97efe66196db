"""Second-hand marketplace: listings, carts and purchase records."""
