"""Prompt templates for the outline and deep-dive passes."""

from __future__ import annotations

CALL_TO_ACTION = "Check out this GPT we trained on the conversation!"

NOT_PROVIDED = "Not provided in transcript."


def build_outline_prompt(narrative: str, end_time: str) -> str:
    """Prompt for the fast outline pass: 8-12 chapters as a bare JSON array."""
    return f"""You are outlining a podcast episode into chapters.

The recording runs from 00:00 to {end_time}.

Split the conversation below into 8-12 chapters in chronological order.
- The first chapter must start at or near 00:00.
- Chapters must cover the whole recording through {end_time}.
- The last chapter must start within the final five minutes of the recording.

For every chapter return:
- "title": a short descriptive title.
- "first": the first sentence of that chapter, copied word for word from the transcript.

Return ONLY a JSON array of objects like
[{{"title": "...", "first": "..."}}]
with no explanation, no prose and no markdown code fences.

TRANSCRIPT
----------
{narrative}
"""


def build_deep_dive_prompt(
    narrative: str,
    chapter_lines: str,
    show_name: str,
    host_name: str,
) -> str:
    """Prompt for the high-quality deep-dive pass that writes the final show notes."""
    return f"""You are an elite podcast show-note writer for "{show_name}".

STYLE & TONE
-------------
- Write in the first-person voice of the host, {host_name} ("I, {host_name}, ...").
- Mention the guest(s) and the show name in the very first sentence.
- After the introduction, include the call-to-action line:
  "{CALL_TO_ACTION}"
- Do NOT add a separate H1 title; start directly with the intro sentence.
- Use simple section names ("Timestamps", "Key Insights", "Contact Information") with no "Introduction" header.

<<<EXAMPLE (do NOT copy; imitate style)>>>
On this episode of {show_name}, I, {host_name}, spoke with Neil Davies, creator of the Extelligencer project, about survival strategies in what he calls the "Dark Forest" of modern civilization: a world shaped by cryptographic trust, intelligence-immune system fusion, and the crumbling authority of legacy institutions. Listeners can find Neil on Twitter as @sigilante and explore more about his work in the Extelligencer substack.

Timestamps
00:00 Introduction of Neil Davies and the Extelligencer project, setting the stage with Dark Forest theory and operational survival concepts.
05:00 Expansion on Dark Forest as a metaphor for Internet-age exposure, with examples like scam evolution, parasites, and the vulnerability of modern systems.
10:00 Discussion of immune-intelligence fusion ...
... (example truncated) ...

Key Insights
The "Dark Forest" is not just a cosmological metaphor, but a description of modern civilization's hidden dangers. ...
Immune function and intelligence have fused ...
... (example truncated) ...

Contact Information
- Neil Davies: Twitter @sigilante
- Extelligencer Substack: https://extelligencer.substack.com
<<<END EXAMPLE>>>

CHAPTER ANCHORS
---------------
These start times come from the real transcript. Use exactly one Timestamps
line per anchor, keep every start time as given, and refine the descriptions.

{chapter_lines}

WHAT TO DELIVER
---------------
1. Intro paragraph: 2-3 sentences in the first-person style above.
2. The exact CTA line: "{CALL_TO_ACTION}"
3. Section: "Timestamps"
   - One line per chapter anchor, formatted as "MM:SS Description" (no bullets).
4. Section: "Key Insights"
   - 5-8 insights. Start each insight with a bolded short heading followed by a 2-4 sentence explanation.
5. Section: "Contact Information"
   - Bullet list of any handles, links, or company names mentioned.
   - If none found, write "{NOT_PROVIDED}"

Markdown is allowed, but keep it lightweight (plain lines for timestamps; bullets only in Contact Information).
Do NOT add any additional commentary before or after the show notes.

TRANSCRIPT
----------
{narrative}
"""
