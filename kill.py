import os
import signal
import psutil

from server import PORT


def kill_process_on_port(port=PORT):
    # Check for processes listening on or connected from the specified port
    for proc in psutil.process_iter(['pid', 'name', 'net_connections']):
        if proc.info['pid'] == os.getpid():
            continue
        # process_iter leaves None here when access is denied
        connections = proc.info.get('net_connections')
        if connections:
            for conn in connections:
                if conn.laddr and conn.laddr.port == port:
                    print(f"Killing process {proc.info['name']} with PID {proc.info['pid']} on port {port}")
                    try:
                        os.kill(proc.info['pid'], signal.SIGTERM)
                    except ProcessLookupError:
                        print(f"Process {proc.info['pid']} exited before it could be killed")
                        return None
                    return proc.info['pid']
    print(f"No process found running on port {port}")
    return None


def main():
    kill_process_on_port(PORT)


if __name__ == "__main__":
    main()
