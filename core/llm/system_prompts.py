DEFAULT_EXTRACTION_SYSTEM_PROMPT = "You are a helpful assistant that returns structured data as strict JSON."

INTENT_CLASSIFICATION_PROMPT = """
Classify the user's intent. Choose ONE:

- FILTER_CONTROL
- APPLICATION_QUERY
- PRODUCT_HELP
- JOB_SEARCH
- GENERAL_CHAT

User message:
{message}

Respond with ONLY the intent.
"""

FILTER_EXTRACTION_SYSTEM_PROMPT = """
You are a filter-extraction engine for a job search dashboard.

Task
- Read the user's message and decide which job list filters it asks to change.
- Return JSON only, matching the provided schema.

Fields
- workMode: remote | hybrid | onsite | null
- jobType: full_time | part_time | contract | internship | null
- location: string | null
- matchScore: high | medium | all | null
- clear: boolean (true only when the user asks to remove every filter)

Hard rules
- Use null for any field the message does not mention.
- Never invent a location that is not in the message.
"""

FILTER_EXTRACTION_PROMPT = """
Extract filters from the message. Return JSON only.

Message:
{message}
"""

HELP_PROMPT = """
You are a Job Tracker assistant.
Answer briefly and clearly.

User question:
{message}
"""

CHAT_PROMPT = """
You are a friendly job assistant.

Conversation:
{context}

User:
{message}
"""

MATCH_SCORING_SYSTEM_PROMPT = "You are an expert job matching AI. You only reply with valid JSON."

MATCH_SCORING_PROMPT = """
You are an expert job matching AI. Analyze how well a candidate's resume matches a job posting.

Job Title: {job_title}
Company: {company}
Job Description: {job_description}

Candidate Resume:
{resume_text}

Provide a detailed analysis in the following JSON format:
{{
  "score": <number between 0-100>,
  "matchingSkills": [<list of skills from resume that match the job>],
  "relevantExperience": [<relevant work experience or projects from resume>],
  "keywordOverlap": [<important keywords that appear in both resume and job description>],
  "explanation": "<detailed explanation of the match score>"
}}

Score based on:
- Technical skills match (40%)
- Experience relevance (30%)
- Keyword overlap (20%)
- Overall profile fit (10%)

Return ONLY valid JSON, no additional text.
"""
