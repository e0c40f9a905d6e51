"""Application layer - ports and the permission manager facade."""
