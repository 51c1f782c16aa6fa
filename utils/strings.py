"""
utils/strings.py
----------------
User-facing string tables, one dict per language code.

`help` takes the four command names positionally:
start, upload, delete, list.
"""

LANGUAGE_LABELS: dict[str, str] = {
    "en": "English",
    "es": "Español",
    "it": "Italiano",
    "ar": "العربية",
}

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "help": (
            "📁 Files Bot\n\n"
            "Share files with anyone through a link.\n\n"
            "{0} <token> - get a shared file\n"
            "{1} - upload a new file\n"
            "{2} - delete one of your files\n"
            "{3} - list your files"
        ),
        "choose_language": "🌐 Choose your language:",
        "language_modified": "✅ Language changed to English.",
        "error_language": "⚠️ That language is not supported.",
        "wrong_file_id": "❌ No file with that id.",
        "send_file_to_upload": "📎 Send me the file you want to share.",
        "process_finished": "👌 Operation cancelled.",
        "delete_uploaded_file": "🗑️ Choose the file you want to delete:",
        "file_deleted": "🗑️ File deleted.",
        "list_of_files": "📂 Your files",
        "no_files": "📭 You haven't uploaded any files yet.",
        "file_uploaded": "✅ File uploaded. Share this link: ",
        "file_already_shared": "ℹ️ This file was already shared by someone else. Link: ",
    },
    "es": {
        "help": (
            "📁 Files Bot\n\n"
            "Comparte archivos con cualquiera mediante un enlace.\n\n"
            "{0} <token> - obtener un archivo compartido\n"
            "{1} - subir un archivo nuevo\n"
            "{2} - borrar uno de tus archivos\n"
            "{3} - ver tus archivos"
        ),
        "choose_language": "🌐 Elige tu idioma:",
        "language_modified": "✅ Idioma cambiado a español.",
        "error_language": "⚠️ Ese idioma no está disponible.",
        "wrong_file_id": "❌ No existe ningún archivo con ese id.",
        "send_file_to_upload": "📎 Envíame el archivo que quieres compartir.",
        "process_finished": "👌 Operación cancelada.",
        "delete_uploaded_file": "🗑️ Elige el archivo que quieres borrar:",
        "file_deleted": "🗑️ Archivo borrado.",
        "list_of_files": "📂 Tus archivos",
        "no_files": "📭 Todavía no has subido ningún archivo.",
        "file_uploaded": "✅ Archivo subido. Comparte este enlace: ",
        "file_already_shared": "ℹ️ Otra persona ya compartió este archivo. Enlace: ",
    },
    "it": {
        "help": (
            "📁 Files Bot\n\n"
            "Condividi file con chiunque tramite un link.\n\n"
            "{0} <token> - ricevi un file condiviso\n"
            "{1} - carica un nuovo file\n"
            "{2} - elimina uno dei tuoi file\n"
            "{3} - elenca i tuoi file"
        ),
        "choose_language": "🌐 Scegli la tua lingua:",
        "language_modified": "✅ Lingua impostata su italiano.",
        "error_language": "⚠️ Questa lingua non è supportata.",
        "wrong_file_id": "❌ Nessun file con questo id.",
        "send_file_to_upload": "📎 Inviami il file che vuoi condividere.",
        "process_finished": "👌 Operazione annullata.",
        "delete_uploaded_file": "🗑️ Scegli il file da eliminare:",
        "file_deleted": "🗑️ File eliminato.",
        "list_of_files": "📂 I tuoi file",
        "no_files": "📭 Non hai ancora caricato nessun file.",
        "file_uploaded": "✅ File caricato. Condividi questo link: ",
        "file_already_shared": "ℹ️ Questo file è già stato condiviso da qualcun altro. Link: ",
    },
    "ar": {
        "help": (
            "📁 Files Bot\n\n"
            "شارك ملفاتك مع أي حد عن طريق رابط.\n\n"
            "{0} <token> - استلام ملف مشترك\n"
            "{1} - رفع ملف جديد\n"
            "{2} - حذف ملف من ملفاتك\n"
            "{3} - عرض ملفاتك"
        ),
        "choose_language": "🌐 اختار لغتك:",
        "language_modified": "✅ تم تغيير اللغة للعربية.",
        "error_language": "⚠️ اللغة دي مش مدعومة.",
        "wrong_file_id": "❌ مفيش ملف بالرقم ده.",
        "send_file_to_upload": "📎 ابعت الملف اللي عايز تشاركه.",
        "process_finished": "👌 تم إلغاء العملية.",
        "list_of_files": "📂 ملفاتك",
        "delete_uploaded_file": "🗑️ اختار الملف اللي عايز تحذفه:",
        "file_deleted": "🗑️ تم حذف الملف.",
        "no_files": "📭 لسه مرفعتش أي ملفات.",
        "file_uploaded": "✅ تم رفع الملف. شارك الرابط ده: ",
        "file_already_shared": "ℹ️ الملف ده متشارك قبل كده من حد تاني. الرابط: ",
    },
}
