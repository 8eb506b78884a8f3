"""Locust load testing script for MeetingMail.

Generation and email tasks call the configured completion provider and SMTP
relay, so point this at a staging deployment with sandbox credentials.
"""

import random

from locust import HttpUser, between, task

SAMPLE_TRANSCRIPTS = [
    "Alice: let's ship Friday. Bob: agreed. Carol: I'll update the changelog.",
    "PM: the beta slips a week. Eng: we need two more days for QA. PM: fine, Tuesday.",
    "Dana: budget is approved. Eli: I'll book the venue. Dana: invites go out Monday.",
]

SAMPLE_INSTRUCTIONS = [
    None,
    "Only list action items with owners",
    "Use a table for decisions and a bullet list for next steps",
]


class MeetingMailUser(HttpUser):
    """Simulated user generating, reviewing and emailing summaries."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    def on_start(self) -> None:
        self.summary_ids: list[str] = []
        self.last_summary = "<p>No summary yet</p>"

    @task(3)
    def generate_summary(self) -> None:
        """Submit a pasted transcript - most common operation."""
        payload = {"transcript": random.choice(SAMPLE_TRANSCRIPTS)}
        instruction = random.choice(SAMPLE_INSTRUCTIONS)
        if instruction:
            payload["customInstruction"] = instruction

        with self.client.post(
            "/api/generate-summary", json=payload, catch_response=True
        ) as response:
            if response.status_code == 200:
                body = response.json()
                self.summary_ids.append(body["id"])
                self.last_summary = body["summary"]
            else:
                response.failure(response.text)

    @task(2)
    def fetch_summary(self) -> None:
        """Re-open a previously generated summary."""
        if not self.summary_ids:
            return
        summary_id = random.choice(self.summary_ids)
        self.client.get(f"/api/summaries/{summary_id}", name="/api/summaries/[id]")

    @task(1)
    def send_email(self) -> None:
        """Email the last summary with a short note."""
        self.client.post(
            "/api/send-email",
            json={
                "recipient": "loadtest@acme.io",
                "subject": "Meeting summary",
                "message": "Notes from today's meeting:\nsee below",
                "summary": self.last_summary,
            },
        )

    @task(1)
    def rejected_request(self) -> None:
        """Validation failures should stay cheap."""
        with self.client.post(
            "/api/generate-summary", json={"transcript": "   "}, catch_response=True
        ) as response:
            if response.status_code == 400:
                response.success()

    @task(1)
    def health(self) -> None:
        self.client.get("/health")
