"""Pure shape rules applied to records after they are read from storage."""
