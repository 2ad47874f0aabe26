SYSTEM_PROMPT = (
    "You are a senior B2B outbound strategist. You have access to a web_search "
    "tool to research the company behind a website. Reply with a single JSON "
    "object and nothing else."
)


def get_campaign_prompt(website: str, positioning: str) -> str:
    """
    Generate the campaign analysis prompt for one prospect.

    Args:
        website: The prospect's website URL (already normalised with a scheme)
        positioning: The prospect's own answer to "is your positioning clear?"
                     (yes / no / unsure)

    Returns:
        Complete prompt string for Claude. Claude is asked for a JSON object
        whose keys map one-to-one onto models.CampaignAnalysis plus companyName.
    """

    base_prompt = """You are analyzing a company's website to produce hyper-specific B2B cold email campaign ideas for them.

## Inputs
- Website URL: {website}
- Prospect's own answer to "Is your positioning clear?": {positioning}

## Research
You may run ONE web search. Use it where it adds the most, for example
"site:<domain> case studies OR customers OR testimonials". Work out:
- What the company sells and to whom
- Value propositions and proof points (customer logos, metrics, case studies)
- Pricing model and company size indicators

If you cannot find real case studies, say so: set "caseStudiesFound" to false and
make every example email clearly hypothetical ("We'd insert your real customer result here").

## Output
Return ONLY a JSON object (no markdown fences, no commentary) with exactly these keys:

{{
  "companyName": "The company's name as it presents itself",
  "positioningAssessmentOutput": "<CLEAR | MODERATELY CLEAR | UNCLEAR>: one or two sentences naming the specific strengths or gaps",
  "idealCustomerProfile": {{
    "industry": "Specific verticals they serve",
    "companySize": "Employee count and/or revenue range",
    "characteristics": ["Specific situation or pain", "... 4 to 6 items"]
  }},
  "personas": [
    {{"title": "Specific job title", "painPoints": "3-4 comma-separated, specific challenges"}}
  ],
  "campaigns": [
    {{
      "name": "Short memorable campaign name",
      "target": "Who exactly receives it, with a concrete qualifier",
      "exampleEmail": "Under 80 words, first name greeting, one concrete observation, one proof point, one soft question"
    }}
  ],
  "caseStudiesFound": true,
  "positioningRecommendation": "One paragraph on how to sharpen their positioning",
  "prospectTargetingNote": "These campaigns would target approximately N,NNN-N,NNN qualified prospects, focusing on ...",
  "reportHtml": "The full report as an HTML fragment"
}}

## Rules
- Exactly 3 personas and exactly 3 campaigns.
- "positioningAssessmentOutput" MUST start with the verdict followed by a colon.
- Weigh the prospect's own answer ({positioning}) against what you observe; call out any mismatch.
- "reportHtml" may only use these tags: h2, h3, p, ul, ol, li, strong, em, blockquote, hr, a.
  No inline styles, scripts, images or event attributes.
- Every campaign must feel like it took hours of research: name their competitors,
  the tools their buyers already use, and realistic numbers for the segment.
"""

    return base_prompt.format(website=website, positioning=positioning)
