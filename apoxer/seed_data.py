"""
Sample catalogue used by the development seeders.
"""

SEED_GAMES = [
    {
        "slug": "valorant",
        "title": "Valorant",
        "description": "A 5v5 character-based tactical FPS where precise gunplay meets unique agent abilities.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49x5.png",
        "platforms": ["PC"],
        "genres": ["FPS", "Tactical"],
        "tags": ["Competitive", "Team-based", "Free-to-play"],
    },
    {
        "slug": "counter-strike-2",
        "title": "Counter-Strike 2",
        "description": "The next evolution of the legendary Counter-Strike series with improved graphics and gameplay.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co6wum.png",
        "platforms": ["PC"],
        "genres": ["FPS", "Tactical"],
        "tags": ["Competitive", "Esports", "Team-based"],
    },
    {
        "slug": "apex-legends",
        "title": "Apex Legends",
        "description": "A free-to-play battle royale game featuring unique characters with special abilities.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co1r7h.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch"],
        "genres": ["Battle Royale", "FPS"],
        "tags": ["Free-to-play", "Squad-based", "Fast-paced"],
    },
    {
        "slug": "fortnite",
        "title": "Fortnite",
        "description": "Build, battle, and survive in this popular battle royale game with creative building mechanics.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49x6.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch", "Mobile"],
        "genres": ["Battle Royale", "Action"],
        "tags": ["Free-to-play", "Building", "Cross-platform"],
    },
    {
        "slug": "overwatch-2",
        "title": "Overwatch 2",
        "description": "Team-based hero shooter with diverse characters and strategic gameplay.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co5p5a.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch"],
        "genres": ["FPS", "Hero Shooter"],
        "tags": ["Team-based", "Competitive", "Free-to-play"],
    },
    {
        "slug": "rocket-league",
        "title": "Rocket League",
        "description": "Soccer meets driving in this physics-based multiplayer game.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co1r76.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch"],
        "genres": ["Sports", "Racing"],
        "tags": ["Competitive", "Cross-platform", "Free-to-play"],
    },
    {
        "slug": "minecraft",
        "title": "Minecraft",
        "description": "Build, explore, and survive in an infinite blocky world with friends.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49x7.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch", "Mobile"],
        "genres": ["Sandbox", "Survival"],
        "tags": ["Creative", "Multiplayer", "Cross-platform"],
    },
    {
        "slug": "among-us",
        "title": "Among Us",
        "description": "Work together to complete tasks, but watch out for the impostor among you.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7h.png",
        "platforms": ["PC", "Mobile", "Nintendo Switch"],
        "genres": ["Party", "Social Deduction"],
        "tags": ["Casual", "Multiplayer", "Free-to-play"],
    },
    {
        "slug": "fall-guys",
        "title": "Fall Guys",
        "description": "Race through chaotic obstacle courses in this battle royale party game.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7i.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch", "Mobile"],
        "genres": ["Party", "Battle Royale"],
        "tags": ["Casual", "Free-to-play", "Cross-platform"],
    },
    {
        "slug": "league-of-legends",
        "title": "League of Legends",
        "description": "The world's most popular MOBA with strategic 5v5 battles.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49x8.png",
        "platforms": ["PC"],
        "genres": ["MOBA", "Strategy"],
        "tags": ["Competitive", "Free-to-play", "Esports"],
    },
    {
        "slug": "dota-2",
        "title": "Dota 2",
        "description": "Deep strategic MOBA with complex mechanics and high skill ceiling.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49x9.png",
        "platforms": ["PC"],
        "genres": ["MOBA", "Strategy"],
        "tags": ["Competitive", "Free-to-play", "Complex"],
    },
    {
        "slug": "rainbow-six-siege",
        "title": "Tom Clancy's Rainbow Six Siege",
        "description": "Tactical 5v5 FPS with destructible environments and unique operators.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49xa.png",
        "platforms": ["PC", "PlayStation", "Xbox"],
        "genres": ["FPS", "Tactical"],
        "tags": ["Competitive", "Team-based", "Strategic"],
    },
    {
        "slug": "destiny-2",
        "title": "Destiny 2",
        "description": "Action MMO with FPS combat, raids, and cooperative gameplay.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co49xb.png",
        "platforms": ["PC", "PlayStation", "Xbox"],
        "genres": ["FPS", "MMO", "RPG"],
        "tags": ["Cooperative", "Looter-shooter", "Free-to-play"],
    },
    {
        "slug": "phasmophobia",
        "title": "Phasmophobia",
        "description": "Cooperative horror game where you investigate paranormal activity with friends.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7j.png",
        "platforms": ["PC", "PlayStation", "Xbox", "VR"],
        "genres": ["Horror", "Cooperative"],
        "tags": ["Multiplayer", "Horror", "Cooperative"],
    },
    {
        "slug": "sea-of-thieves",
        "title": "Sea of Thieves",
        "description": "Pirate adventure game where you sail the seas with your crew.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7k.png",
        "platforms": ["PC", "Xbox"],
        "genres": ["Adventure", "Action"],
        "tags": ["Cooperative", "Open-world", "Cross-platform"],
    },
    {
        "slug": "dead-by-daylight",
        "title": "Dead by Daylight",
        "description": "Asymmetric horror game where survivors try to escape a killer.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7l.png",
        "platforms": ["PC", "PlayStation", "Xbox", "Nintendo Switch", "Mobile"],
        "genres": ["Horror", "Asymmetric"],
        "tags": ["Multiplayer", "Horror", "Competitive"],
    },
    {
        "slug": "call-of-duty-warzone",
        "title": "Call of Duty: Warzone",
        "description": "Free-to-play battle royale set in the Call of Duty universe.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7m.png",
        "platforms": ["PC", "PlayStation", "Xbox"],
        "genres": ["Battle Royale", "FPS"],
        "tags": ["Free-to-play", "Competitive", "Cross-platform"],
    },
    {
        "slug": "gta-online",
        "title": "Grand Theft Auto Online",
        "description": "Massive multiplayer experience in the world of Los Santos.",
        "cover_url": "https://images.igdb.com/igdb/image/upload/t_cover_big/co2r7n.png",
        "platforms": ["PC", "PlayStation", "Xbox"],
        "genres": ["Action", "Open-world"],
        "tags": ["Multiplayer", "Open-world", "Cooperative"],
    },
]

COMMUNITY_TEMPLATES = [
    {"name": "Official Community", "category": "General", "language": "English"},
    {"name": "Competitive Players", "category": "Competitive", "language": "English"},
    {"name": "Casual Gaming", "category": "Casual", "language": "English"},
]

VERSION_TEMPLATES = {
    "valorant": ["Episode 8", "Season 3", "Act 2"],
    "counter-strike-2": ["Update 2.0", "Operation Update"],
    "apex-legends": ["Season 20", "Collection Event"],
    "fortnite": ["Chapter 5", "Season 2"],
    "rocket-league": ["Season 14", "Tournament Update"],
}

EVENT_TEMPLATES = {
    "valorant": [
        {
            "description": "Looking for ranked players, positive K/D only",
            "tags": ["#Ranked", "#rankonly", "#Plat1andup", "#winstreak", "#EnglishSpeakers", "#TEAMWORK", "Mic required"],
            "players_needed": 1,
            "players_have": 1,
            "language": "English",
            "platform": "PC",
        },
        {
            "description": "Casual 5v5, all welcome",
            "tags": ["Mic optional", "All content OK", "Swearing OK", "Competitive", "All ages"],
            "players_needed": 6,
            "players_have": 1,
            "language": "English",
            "platform": "PC",
        },
        {
            "description": "Kid-friendly session",
            "tags": ["Kid-friendly content", "No swearing", "No trash-talking", "Mic optional", "New players welcome"],
            "players_needed": 1,
            "players_have": 0,
            "language": "English",
            "platform": "PC",
        },
    ],
    "apex-legends": [
        {
            "description": "Ranked grind, Diamond+ only",
            "tags": ["#Ranked", "Mic required", "Competitive", "#DiamondPlus"],
            "players_needed": 2,
            "players_have": 1,
            "language": "English",
            "platform": "PC",
        },
        {
            "description": "Casual trios, just for fun",
            "tags": ["Casual", "Mic optional", "All content OK"],
            "players_needed": 2,
            "players_have": 1,
            "language": "English",
            "platform": None,
        },
    ],
    "counter-strike-2": [
        {
            "description": "Competitive matchmaking, LE+",
            "tags": ["Competitive", "Mic required", "#LEPlus", "#EnglishSpeakers"],
            "players_needed": 4,
            "players_have": 1,
            "language": "English",
            "platform": "PC",
        },
    ],
}
