"""Click plumbing shared by the publish-easier entry point."""
