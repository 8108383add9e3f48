"""Fixed enumerations shared by courses, reviews and materials."""
from __future__ import annotations

PROGRAMS = [
    "Animation and Visual Effects",
    "Chinese",
    "Creative Advertising and Media Design",
    "Creative Writing and Film Arts",
    "English Language and Culture",
    "Imaging Design and Digital Art",
    "Language Studies and Translation",
    "New Music and Interactive Entertainment",
    "Psychology",
    "Social Sciences",
    "Applied Psychology, Business Management",
    "Aviation Services Management",
    "Business Management",
    "Finance and Financial Technology",
    "Global Business",
    "Global Marketing and Supply Chain Management",
    "Human Resource Management",
    "International Hospitality and Attractions Management",
    "Marketing",
    "Professional Accounting",
    "Real Estate and Surveying",
    "Sports and Recreation Management",
    "Sports and eSports Management",
    "Sustainable Tourism and Hospitality Management",
    "Applied Chinese Language Studies",
    "Chinese Language Teaching and Applied Chinese Language Studies",
    "Early Childhood Education (Leadership and Special Educational Needs)",
    "English Language Studies",
    "English Language Teaching and English Language Studies",
    "Putonghua and Chinese Language Education and Chinese Linguistic Studies",
    "Diagnostic Radiography",
    "Medical Laboratory Science",
    "Nursing (General Health Care)",
    "Nursing (Mental Health Care)",
    "Physiotherapy",
    "Analytical Testing Science",
    "Biomedical Sciences and Biotechnology",
    "Building Engineering and Management",
    "Building Services Engineering and Sustainable Development",
    "Civil Engineering",
    "Computer Engineering",
    "Computer Science",
    "Computing",
    "Construction Management and Quantity Surveying",
    "Cyber and Computer Security",
    "Data Science and Artificial Intelligence",
    "Electronic and Computer Engineering",
    "Environmental Science and Green Management",
    "Food Testing Science",
    "Integrated Testing, Inspection and Certification",
    "Robotics and Automation Engineering",
    "Science (STEAM)",
]

SEMESTERS = ["Autumn", "Spring", "Summer"]

MATERIAL_TYPES = ["Notes", "Past Paper", "Solution", "Summary", "Others"]

GRADES = ["A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D+", "D", "Pass1", "Pass2", "Pass3", "Pass4", "Fail"]

ALLOWED_FILE_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB

ITEMS_PER_PAGE = 12

MIN_RATING = 1
MAX_RATING = 5

MIN_YEAR = 2020
MAX_YEAR = 2030


def choices(values: list[str]) -> list[tuple[str, str]]:
    return [(v, v) for v in values]
