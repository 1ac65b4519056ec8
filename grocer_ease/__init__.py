"""GrocerEase database bootstrap."""
