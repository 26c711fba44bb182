# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""
Locust load testing configuration for the live blog server.
Every page rebuilds its posts from disk, so this mostly measures Markdown
rendering cost as the posts directory grows.

    locust -f locustfile.py --host http://localhost:8090
"""

import random
import re
from locust import HttpUser, task, between

POST_LINK = re.compile(r'href="(/post/[^"]+)"')

class Reader(HttpUser):
    """A visitor who lands on the home page and reads a few posts."""
    wait_time = between(1, 5)

    def on_start(self):
        self.post_urls = []
        with self.client.get("/", catch_response=True) as response:
            if response.status_code != 200:
                response.failure(f"Home page returned {response.status_code}")
                return
            self.post_urls = POST_LINK.findall(response.text)

    @task(10)
    def read_post(self):
        if not self.post_urls:
            return
        self.client.get(random.choice(self.post_urls), name="/post/[slug]")

    @task(5)
    def home(self):
        self.client.get("/")

    @task(2)
    def thoughts(self):
        self.client.get("/thoughts")

    @task(1)
    def about(self):
        self.client.get("/about")

    @task(1)
    def contact(self):
        self.client.get("/contact")

    @task(1)
    def missing_post(self):
        """Unknown slugs must come back as 404, never 500."""
        with self.client.get("/post/this-post-does-not-exist", name="/post/[missing]", catch_response=True) as response:
            if response.status_code == 404:
                response.success()
            else:
                response.failure(f"Expected 404, got {response.status_code}")
