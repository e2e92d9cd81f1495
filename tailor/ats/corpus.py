# tailor/ats/corpus.py
from tailor.models import CandidateProfile


def extract_corpus(profile: CandidateProfile) -> str:
    """
    Flatten the searchable text of a profile into one lowercase string.

    Covers the summary, experience bullets, skill names, project descriptions
    and bullets, and certification names. Order does not matter to matching.
    """
    parts = []

    if profile.summary:
        parts.append(profile.summary)

    for exp in profile.experience:
        parts.extend(exp.bullets)

    for skill in profile.skills:
        parts.append(skill.name)

    for project in profile.projects:
        if project.description:
            parts.append(project.description)
        parts.extend(project.bullets)

    for cert in profile.certifications:
        parts.append(cert.name)

    return ' '.join(parts).lower()
