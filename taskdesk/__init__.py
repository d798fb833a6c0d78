"""taskdesk: multi-tenant task tracking API with role-based access and guest review."""
