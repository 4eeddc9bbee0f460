"""
student_records package

Dieses Paket implementiert eine kleine Konsolen-Anwendung zur Verwaltung von
Studentendaten (anlegen, löschen, suchen, Bericht, Datei speichern/laden).

Schichtenarchitektur:
- domain.py: Entität StudentRecord
- errors.py: Fehlerklassen
- events.py: Ereignisse + Observer-Schnittstelle
- store.py: Record Store (In-Memory-Sammlung)
- codec.py: Textformat (Serialisierung)
- persistence.py: Datei-Zugriff
- service.py: Use-Cases, Fehler werden zu Ergebnissen
- parsing.py: Eingaben parsen ohne Exceptions
- view.py: Konsolen-Ausgabe
- controller.py: Menü-Orchestrierung
- logging_setup.py: Logging-Anbindung
- context.py: Konfiguration + Anwendungskontext
- main.py: Einstiegspunkt
"""
