"""Coffee cart storefront: cart, promotion and checkout engine with a Textual front end."""
