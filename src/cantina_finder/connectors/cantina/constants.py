"""Cantina listing endpoint constants."""

API_BASE_URL = "https://cantina.xyz/api/v0"
OPPORTUNITIES_PATH = "/opportunities"

# Single page; the listing is never paginated further
LISTING_LIMIT = 1000

# Opportunity kinds requested from the listing endpoint
PUBLIC_BOUNTY = "public_bounty"
PRIVATE_BOUNTY = "private_bounty"
PUBLIC_CONTEST = "public_contest"
PRIVATE_CONTEST = "private_contest"
LISTING_KINDS = (PUBLIC_BOUNTY, PRIVATE_BOUNTY, PUBLIC_CONTEST, PRIVATE_CONTEST)

# Response envelope
ITEMS_KEY = "items"
