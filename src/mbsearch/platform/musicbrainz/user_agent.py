"""Where: src/mbsearch/platform/musicbrainz/user_agent.py
What: Build MusicBrainz-compliant User-Agent strings.
Why: MusicBrainz identifies and throttles clients by this header.
"""

from __future__ import annotations


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version ( contact )``.

    See https://musicbrainz.org/doc/MusicBrainz_API/Rate_Limiting#Provide_meaningful_User-Agent_strings
    """

    return f"{app_name}/{app_version} ( {contact} )"


__all__ = ["format_user_agent"]
