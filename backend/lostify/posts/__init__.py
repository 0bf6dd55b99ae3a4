"""Lost and found posts: listing, CRUD, moderation and export."""
