"""Protocol implementations (Django ORM repository, signal notifier)."""
