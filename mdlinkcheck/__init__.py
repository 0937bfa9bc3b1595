"""mdlinkcheck - validate internal links in Markdown documents."""
