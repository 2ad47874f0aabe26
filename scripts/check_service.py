#!/usr/bin/env python3
"""
Live check for the Campaign Generator service
Run this after starting the service (python3 main.py)

Usage:
    python3 scripts/check_service.py --mode [quick|full]

    quick: health and status endpoints only
    full: also runs one real generation (15-20 seconds, uses Anthropic credits)
"""

import argparse
import json
import sys
import time
from pathlib import Path

import requests

# Add parent directory to path to import project modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from client import CampaignGeneratorClient, ViewState  # noqa: E402
from views import build_results_view  # noqa: E402

TEST_EMAIL = "growth@example-saas.com"
TEST_WEBSITE = "https://www.voxpopme.com"  # Change to any website you want to test


def check_health(base_url: str) -> bool:
    """Check the basic health endpoint"""
    print("🔍 Checking health...")
    response = requests.get(f"{base_url}/health")
    print(f"Status: {response.status_code}")
    print(f"Response: {response.json()}\n")
    return response.status_code == 200


def check_relay_status(base_url: str) -> bool:
    """Check the relay's GET status endpoint"""
    print("🔍 Checking relay status...")
    response = requests.get(f"{base_url}/api/generate-campaigns")
    print(f"Status: {response.status_code}")
    print(f"Response: {response.json()}\n")
    return response.status_code == 200


def check_rejects_incomplete_submission(base_url: str) -> bool:
    """An incomplete submission must come back as a success:false envelope"""
    print("🔍 Checking server-side validation...")
    response = requests.post(
        f"{base_url}/api/generate-campaigns", json={"email": TEST_EMAIL}
    )
    body = response.json()
    print(f"Status: {response.status_code}")
    print(f"Response: {body}\n")
    return response.status_code == 400 and body.get("success") is False


def check_generation(base_url: str) -> bool:
    """Run one real generation through the Python client"""
    print(f"🔍 Generating campaigns for {TEST_WEBSITE}")
    print("This usually takes 15-20 seconds...\n")

    started = time.time()
    client = CampaignGeneratorClient(base_url=base_url)
    outcome = client.submit(TEST_EMAIL, TEST_WEBSITE, "unsure")
    elapsed = time.time() - started

    if outcome.state is not ViewState.SHOWING_RESULTS:
        print(f"❌ Error after {elapsed:.1f}s: {outcome.error}")
        return False

    view = build_results_view(outcome.data)
    print(f"{'='*60}")
    print(f"Company: {view.company_name}  ({elapsed:.1f}s)")
    print(f"Assessment: {view.headline}")
    print(f"   {view.detail}")
    print(f"Personas: {view.persona_count}  Campaigns: {view.campaign_count}  Prospects: {view.prospect_count}")
    for campaign in view.campaigns:
        print(f"  - {campaign.name} -> {campaign.target}")
    print("=" * 60)

    output_file = Path("campaign_result.json")
    output_file.write_text(json.dumps(outcome.data, indent=2))
    print(f"📄 Full result saved to: {output_file.absolute()}\n")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Check a running Campaign Generator")
    parser.add_argument("--mode", choices=["quick", "full"], default="quick")
    parser.add_argument("--base-url", default="http://localhost:8000")
    args = parser.parse_args()

    print("🚀 Campaign Generator Service Check\n")

    try:
        checks = [check_health, check_relay_status, check_rejects_incomplete_submission]
        if args.mode == "full":
            checks.append(check_generation)

        failed = [check.__name__ for check in checks if not check(args.base_url)]
    except requests.exceptions.ConnectionError:
        print(f"\n❌ Could not connect to {args.base_url}")
        print("Make sure the service is running: python3 main.py")
        return 1

    if failed:
        print(f"❌ Failed checks: {', '.join(failed)}")
        return 1

    print("✅ All selected checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
