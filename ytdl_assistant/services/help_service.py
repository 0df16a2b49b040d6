GREETING = "Halo! Saya asisten AI Anda. Saya bisa membantu Anda dengan YouTube downloader ini. Silakan tanya apa saja!"

# Checked in order; the first keyword found in the error text wins
ERROR_HINTS = [
    ("network", "Periksa koneksi internet Anda dan pastikan URL API dapat diakses."),
    ("cors", "Error CORS - API mungkin perlu dikonfigurasi untuk mengizinkan akses dari browser."),
    ("401", "Error autentikasi - periksa API key Anda."),
    ("404", "URL API tidak ditemukan - periksa kembali URL yang Anda masukkan."),
    ("500", "Error server - coba lagi dalam beberapa saat."),
    ("timeout", "Koneksi timeout - coba dengan URL yang lebih pendek atau periksa koneksi."),
]
UNKNOWN_ERROR_HINT = "Terjadi error yang tidak diketahui. Coba periksa log aplikasi untuk detail lebih lanjut."

QUICK_HELP = {
    "api": (
        "Untuk menggunakan downloader ini, Anda perlu:\n"
        "1. Masukkan URL API YouTube downloader Anda\n"
        "2. Tambahkan API Key jika diperlukan\n"
        "3. Paste URL YouTube\n"
        "4. Klik \"Dapatkan Info Video\""
    ),
    "url": (
        "Format URL YouTube yang valid:\n"
        "- https://www.youtube.com/watch?v=VIDEO_ID\n"
        "- https://youtu.be/VIDEO_ID\n"
        "- https://youtube.com/embed/VIDEO_ID"
    ),
    "quality": (
        "Setelah video diproses, Anda akan melihat opsi kualitas yang tersedia. Pilih sesuai kebutuhan:\n"
        "- HD untuk kualitas terbaik\n"
        "- SD untuk file lebih kecil\n"
        "- Audio only untuk musik"
    ),
    "error": (
        "Jika terjadi error, coba:\n"
        "1. Periksa URL YouTube\n"
        "2. Pastikan API URL benar\n"
        "3. Cek koneksi internet\n"
        "4. Refresh halaman dan coba lagi"
    ),
}
UNKNOWN_TOPIC_HELP = "Maaf, saya tidak memiliki bantuan khusus untuk topik tersebut. Silakan tanyakan pertanyaan spesifik!"


def troubleshooting_hint(error_text: str) -> str:
    lowered = (error_text or "").lower()
    for keyword, hint in ERROR_HINTS:
        if keyword in lowered:
            return hint
    return UNKNOWN_ERROR_HINT


def quick_help(topic: str) -> str:
    return QUICK_HELP.get((topic or "").strip().lower(), UNKNOWN_TOPIC_HELP)
