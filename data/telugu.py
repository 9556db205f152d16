"""
Grantha - Telugu Book Names

Official Bible Society of India (BSI) Telugu book titles and the
synonym table of colloquial spellings, short forms and romanized stubs
that users type into the search box.

Both tables are many-to-one onto the canonical English names. A key
that maps to two different books is rejected when the lookup indexes
are built in ``data.books``.
"""
from typing import Dict

# =============================================================================
# OFFICIAL NAMES - canonical English -> BSI Telugu title
# =============================================================================

TELUGU_BOOK_NAMES: Dict[str, str] = {
    # Old Testament
    "Genesis": "ఆదికాండము",
    "Exodus": "నిర్గమకాండము",
    "Leviticus": "లేవీయకాండము",
    "Numbers": "సంఖ్యాకాండము",
    "Deuteronomy": "ద్వితీయోపదేశకాండము",
    "Joshua": "యెహోషువ",
    "Judges": "న్యాయాధిపతులు",
    "Ruth": "రూతు",
    "1 Samuel": "1 సమూయేలు",
    "2 Samuel": "2 సమూయేలు",
    "1 Kings": "1 రాజులు",
    "2 Kings": "2 రాజులు",
    "1 Chronicles": "1 దినవృత్తాంతములు",
    "2 Chronicles": "2 దినవృత్తాంతములు",
    "Ezra": "ఎజ్రా",
    "Nehemiah": "నెహెమ్యా",
    "Esther": "ఎస్తేరు",
    "Job": "యోబు గ్రంథము",
    "Psalms": "కీర్తనల గ్రంథము",
    "Proverbs": "సామెతలు",
    "Ecclesiastes": "ప్రసంగి",
    "Song of Solomon": "పరమగీతము",
    "Isaiah": "యెషయా గ్రంథము",
    "Jeremiah": "యిర్మీయా",
    "Lamentations": "విలాపవాక్యములు",
    "Ezekiel": "యెహెజ్కేలు",
    "Daniel": "దానియేలు",
    "Hosea": "హోషేయ",
    "Joel": "యోవేలు",
    "Amos": "ఆమోసు",
    "Obadiah": "ఓబద్యా",
    "Jonah": "యోనా",
    "Micah": "మీకా",
    "Nahum": "నహూము",
    "Habakkuk": "హబక్కూకు",
    "Zephaniah": "జెఫన్యా",
    "Haggai": "హగ్గయి",
    "Zechariah": "జెకర్యా",
    "Malachi": "మలాకీ",
    # New Testament
    "Matthew": "మత్తయి సువార్త",
    "Mark": "మార్కు సువార్త",
    "Luke": "లూకా సువార్త",
    "John": "యోహాను సువార్త",
    "Acts": "అపొస్తలుల కార్యములు",
    "Romans": "రోమీయులకు",
    "1 Corinthians": "1 కొరింథీయులకు",
    "2 Corinthians": "2 కొరింథీయులకు",
    "Galatians": "గలతీయులకు",
    "Ephesians": "ఎఫెసీయులకు",
    "Philippians": "ఫిలిప్పీయులకు",
    "Colossians": "కొలొస్సయులకు",
    "1 Thessalonians": "1 థెస్సలొనీకయులకు",
    "2 Thessalonians": "2 థెస్సలొనీకయులకు",
    "1 Timothy": "1 తిమోతికి",
    "2 Timothy": "2 తిమోతికి",
    "Titus": "తీతుకు",
    "Philemon": "ఫిలేమోనుకు",
    "Hebrews": "హెబ్రీయులకు",
    "James": "యాకోబు",
    "1 Peter": "1 పేతురు",
    "2 Peter": "2 పేతురు",
    "1 John": "1 యోహాను",
    "2 John": "2 యోహాను",
    "3 John": "3 యోహాను",
    "Jude": "యూదా",
    "Revelation": "ప్రకటన గ్రంథము",
}


# =============================================================================
# SYNONYMS - alternate spelling -> canonical English
# =============================================================================

TELUGU_SYNONYMS: Dict[str, str] = {
    # Law
    "ఆదికాండము": "Genesis", "ఆదికాండం": "Genesis", "ఆది": "Genesis", "ఆదికాండ": "Genesis",
    "నిర్గమకాండము": "Exodus", "నిర్గమకాండం": "Exodus", "నిర్గమము": "Exodus", "నిర్గమం": "Exodus",
    "లేవీయకాండము": "Leviticus", "లేవీయకాండం": "Leviticus",
    "సంఖ్యాకాండము": "Numbers", "సంఖ్యాకాండం": "Numbers", "సంఖ్యలు": "Numbers",
    "ద్వితీయోపదేశకాండము": "Deuteronomy", "ద్వితీయోపదేశము": "Deuteronomy",

    # History
    "యెహోషువ": "Joshua",
    "న్యాయాధిపతులు": "Judges", "న్యాయాధిపతి": "Judges",
    "రూతు": "Ruth",
    "1 సమూయేలు": "1 Samuel", "2 సమూయేలు": "2 Samuel",
    "1 రాజులు": "1 Kings", "2 రాజులు": "2 Kings",
    "1 దినవృత్తాంతములు": "1 Chronicles", "2 దినవృత్తాంతములు": "2 Chronicles",
    "ఎజ్రా": "Ezra", "నెహెమ్యా": "Nehemiah", "ఎస్తేరు": "Esther",

    # Poetry
    "యోబు": "Job", "యోబు గ్రంథం": "Job",
    "కీర్తనల గ్రంథము": "Psalms", "కీర్తనల గ్రంథం": "Psalms", "కీర్తనలు": "Psalms",
    "కీర్తన": "Psalms", "కీర్తనల": "Psalms",
    "సామెతలు": "Proverbs", "సామెత": "Proverbs",
    "ప్రసంగి": "Ecclesiastes", "కొహేలెత్": "Ecclesiastes",
    "పరమగీతము": "Song of Solomon", "పరమగీతం": "Song of Solomon", "పరమగీత": "Song of Solomon",

    # Prophets
    "యెషయా": "Isaiah",
    "యిర్మియా": "Jeremiah", "యిర్మీయా": "Jeremiah",
    "విలాపవాక్యములు": "Lamentations", "విలాపవాక్యాలు": "Lamentations",
    "యెహెజ్కేలు": "Ezekiel", "దానియేలు": "Daniel",
    "హోషేయా": "Hosea", "యోవేలు": "Joel", "ఆమోసు": "Amos", "ఓబద్యా": "Obadiah",
    "యోనా": "Jonah", "మీకా": "Micah", "నాహూము": "Nahum", "హబక్కూకు": "Habakkuk",
    "సెఫన్యా": "Zephaniah", "హగ్గయి": "Haggai", "జెకర్యా": "Zechariah", "మలాకీ": "Malachi",

    # Gospels and Acts
    "మత్తయి": "Matthew", "మార్కు": "Mark", "లూకా": "Luke", "యోహాను": "John",
    "యోహాను సువార్త": "John", "యోహానుతో": "John",
    "అపొస్తలుల కార్యములు": "Acts", "అపొస్తలుల": "Acts", "ప్రేరితుల కార్యములు": "Acts",

    # Epistles
    "రోమీయులకు": "Romans", "రోమా": "Romans",
    "1 కొరింథీయులకు": "1 Corinthians", "2 కొరింథీయులకు": "2 Corinthians",
    "గలతీయులకు": "Galatians", "ఎఫెసీయులకు": "Ephesians",
    "ఫిలిప్పీయులకు": "Philippians", "కొలస్సయులకు": "Colossians",
    "1 థెస్సలొనీకయులకు": "1 Thessalonians", "2 థెస్సలొనీకయులకు": "2 Thessalonians",
    "1 తిమోతికి": "1 Timothy", "1 తిమోతి": "1 Timothy", "1 తిమోతి పత్రిక": "1 Timothy",
    "2 తిమోతికి": "2 Timothy", "2 తిమోతి": "2 Timothy", "2 తిమోతి పత్రిక": "2 Timothy",
    "తీతుకు": "Titus", "తీతు": "Titus",
    "ఫిలేమోనుకు": "Philemon", "ఫిలేమోను": "Philemon",
    "హెబ్రీయులకు": "Hebrews", "హెబ్రీ": "Hebrews",
    "యాకోబు": "James",
    "1 పేతురు": "1 Peter", "2 పేతురు": "2 Peter",
    "1 యోహాను": "1 John", "2 యోహాను": "2 John", "3 యోహాను": "3 John",
    "యూదా": "Jude",
    "ప్రకటన గ్రంథము": "Revelation", "ప్రకటన": "Revelation",

    # Romanized and English stubs
    "gen": "Genesis", "genesis": "Genesis", "exod": "Exodus", "ps": "Psalms",
    "psalm": "Psalms", "psalms": "Psalms", "prov": "Proverbs", "prov.": "Proverbs",
    "song": "Song of Solomon", "song of solomon": "Song of Solomon",
    "yohanu": "John", "mattai": "Matthew", "matthew": "Matthew",
    "1 tim": "1 Timothy", "2 tim": "2 Timothy", "1tim": "1 Timothy", "2tim": "2 Timothy",
    "tim": "1 Timothy",
    "1cor": "1 Corinthians", "2cor": "2 Corinthians", "rom": "Romans", "roms": "Romans",
}
